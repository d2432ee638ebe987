from __future__ import annotations

import typer

from pubflow.cli.context import build_context, make_console
from pubflow.core.config import RunConfig
from pubflow.core.errors import ErrorCode
from pubflow.core.result import Err, Ok
from pubflow.core.target import Target
from pubflow.output.console import ConsoleProtocol
from pubflow.output.errors import print_publish_error, publish_error_exit_code
from pubflow.services.model import PublishReport
from pubflow.services.pipeline import publish

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _resolve_target(testpypi: bool, prod: bool, console: ConsoleProtocol) -> Target:
    if testpypi and prod:
        console.error("Choose only one: --testpypi or --prod")
        raise typer.Exit(code=int(ErrorCode.USAGE_ERROR))
    if testpypi:
        return Target.testpypi
    if prod:
        return Target.pypi
    console.error("Choose one: --testpypi or --prod")
    raise typer.Exit(code=int(ErrorCode.USAGE_ERROR))


def _print_done(report: PublishReport, console: ConsoleProtocol) -> None:
    if report.verification is None:
        console.success("Upload complete (verification skipped).")
        return
    package = report.verification.package
    console.success(
        f"All done! Published {package.requirement} to {report.target} "
        "and verified installation."
    )


@app.command()
def main_command(
    testpypi: bool = typer.Option(
        False,
        "--testpypi",
        help="Upload to TestPyPI and verify from it (PyPI serves the dependencies).",
    ),
    prod: bool = typer.Option(
        False,
        "--prod",
        "--pypi",
        help="Upload to PyPI and verify from it.",
    ),
    skip_verify: bool = typer.Option(False, "--skip-verify", help="Upload only."),
    version: str | None = typer.Option(
        None,
        "--version",
        metavar="X.Y.Z",
        help="Override the version read from pyproject.toml.",
        show_default=False,
    ),
) -> None:
    """Build and publish the package in the current directory, then verify the install.

    [bold]Examples[/bold]

      pubflow --testpypi

      pubflow --prod

      pubflow --skip-verify --prod

      pubflow --version 1.2.3 --testpypi
    """
    console = make_console()
    target = _resolve_target(testpypi, prod, console)
    ctx = build_context(console)

    config = RunConfig(target=target, skip_verify=skip_verify, version_override=version)
    match publish(project=ctx.project, settings=ctx.settings, config=config, console=console):
        case Ok(report):
            _print_done(report, console)
        case Err(error):
            print_publish_error(error, console)
            raise typer.Exit(code=publish_error_exit_code(error))


def main() -> None:
    app(prog_name="pubflow")
