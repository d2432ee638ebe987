from __future__ import annotations

from dataclasses import dataclass

import typer

from pubflow.core.config import Settings, load_settings_or_default
from pubflow.core.project import Project, detect_project
from pubflow.core.result import Err
from pubflow.output.console import ConsoleProtocol, RichConsole
from pubflow.output.errors import print_publish_error, publish_error_exit_code
from pubflow.services.errors import ConfigMissing


@dataclass(frozen=True, slots=True)
class CLIContext:
    project: Project
    settings: Settings
    console: ConsoleProtocol


def make_console() -> ConsoleProtocol:
    return RichConsole()


def build_context(console: ConsoleProtocol) -> CLIContext:
    """Detect the project in the working directory or exit with a usage error."""
    project_result = detect_project()
    if isinstance(project_result, Err):
        error = ConfigMissing(path=project_result.error.path)
        print_publish_error(error, console)
        raise typer.Exit(code=publish_error_exit_code(error))

    project = project_result.value
    return CLIContext(
        project=project,
        settings=load_settings_or_default(project.pyproject_path),
        console=console,
    )
