"""Tests for the verification stage."""

from __future__ import annotations

from pathlib import Path

from pubflow.core.package import PackageDescriptor
from pubflow.core.project import Project
from pubflow.core.result import Err, Ok
from pubflow.core.target import PYPI_SIMPLE_URL, TESTPYPI_SIMPLE_URL, Target
from pubflow.output.console import MockConsole
from pubflow.services.verify import WORKDIR_PREFIX, VerifyService

from .._fakes import HOST_PYTHON, FakeTools

PACKAGE = PackageDescriptor(
    name="demo-pkg",
    version="1.2.3",
    import_name="demo_pkg",
    entry_point="demo",
)


def _service(project: Project, console: MockConsole) -> VerifyService:
    return VerifyService(project=project, python=HOST_PYTHON, console=console)


def _workdir(tools: FakeTools) -> Path:
    venv_cmd = tools.calls_of("venv")[0]
    return Path(venv_cmd[3]).parent


def test_runs_steps_in_order(
    project: Project, console: MockConsole, fake_tools: FakeTools
) -> None:
    result = _service(project, console).verify(PACKAGE, Target.testpypi)

    assert isinstance(result, Ok)
    assert fake_tools.kinds == ["venv", "venv-pip", "install", "import"]


def test_uses_fresh_uniquely_named_workdir(
    project: Project, console: MockConsole, fake_tools: FakeTools
) -> None:
    _service(project, console).verify(PACKAGE, Target.pypi)

    workdir = _workdir(fake_tools)
    assert workdir.name.startswith(WORKDIR_PREFIX)
    assert workdir != project.root
    assert fake_tools.calls_of("venv")[0] == [HOST_PYTHON, "-m", "venv", str(workdir / "venv")]


def test_workdir_removed_after_success(
    project: Project, console: MockConsole, fake_tools: FakeTools
) -> None:
    _service(project, console).verify(PACKAGE, Target.pypi)

    assert not _workdir(fake_tools).exists()


def test_installs_exact_version_from_testpypi(
    project: Project, console: MockConsole, fake_tools: FakeTools
) -> None:
    _service(project, console).verify(PACKAGE, Target.testpypi)

    install = fake_tools.calls_of("install")[0]
    assert install[1:] == [
        "-m",
        "pip",
        "install",
        "--no-cache-dir",
        "--index-url",
        TESTPYPI_SIMPLE_URL,
        "--extra-index-url",
        PYPI_SIMPLE_URL,
        "demo-pkg==1.2.3",
    ]
    assert install[0] == str(_workdir(fake_tools) / "venv" / "bin" / "python")


def test_installs_from_pypi_without_extra_index(
    project: Project, console: MockConsole, fake_tools: FakeTools
) -> None:
    _service(project, console).verify(PACKAGE, Target.pypi)

    install = fake_tools.calls_of("install")[0]
    assert install[1:] == ["-m", "pip", "install", "--no-cache-dir", "demo-pkg==1.2.3"]


def test_venv_failure_is_fatal_and_cleans_up(
    project: Project, console: MockConsole, fake_tools: FakeTools
) -> None:
    fake_tools.fail["venv"] = 1

    result = _service(project, console).verify(PACKAGE, Target.pypi)

    assert isinstance(result, Err)
    assert result.error.step == "venv"
    assert fake_tools.kinds == ["venv"]
    assert not _workdir(fake_tools).exists()


def test_pip_upgrade_failure_is_fatal(
    project: Project, console: MockConsole, fake_tools: FakeTools
) -> None:
    fake_tools.fail["venv-pip"] = 2

    result = _service(project, console).verify(PACKAGE, Target.pypi)

    assert isinstance(result, Err)
    assert result.error.step == "pip"
    assert result.error.returncode == 2


def test_install_failure_is_fatal_and_cleans_up(
    project: Project, console: MockConsole, fake_tools: FakeTools
) -> None:
    fake_tools.fail["install"] = 1

    result = _service(project, console).verify(PACKAGE, Target.testpypi)

    assert isinstance(result, Err)
    assert result.error.step == "install"
    assert result.error.detail == "demo-pkg==1.2.3"
    assert "import" not in fake_tools.kinds
    assert not _workdir(fake_tools).exists()


def test_import_reports_location(
    project: Project, console: MockConsole, fake_tools: FakeTools
) -> None:
    result = _service(project, console).verify(PACKAGE, Target.pypi)

    assert isinstance(result, Ok)
    assert result.value.smoke.imported_from == "/venv/lib/site-packages/demo_pkg/__init__.py"
    assert console.find("Imported: /venv/lib/site-packages/demo_pkg/__init__.py")
    import_cmd = fake_tools.calls_of("import")[0]
    assert import_cmd[-1] == "demo_pkg"


def test_import_failure_only_warns(
    project: Project, console: MockConsole, fake_tools: FakeTools
) -> None:
    fake_tools.fail["import"] = 1

    result = _service(project, console).verify(PACKAGE, Target.pypi)

    assert isinstance(result, Ok)
    assert result.value.smoke.imported_from is None
    assert console.has_warning()
    assert console.find("No module named 'demo_pkg'")


def test_missing_entry_point_is_skipped(
    project: Project, console: MockConsole, fake_tools: FakeTools
) -> None:
    result = _service(project, console).verify(PACKAGE, Target.pypi)

    assert isinstance(result, Ok)
    assert result.value.smoke.entry_point_ran is False
    assert "entry-point" not in fake_tools.kinds


def test_entry_point_help_is_run(
    project: Project, console: MockConsole, fake_tools: FakeTools
) -> None:
    fake_tools.installed_scripts = ("demo",)

    result = _service(project, console).verify(PACKAGE, Target.pypi)

    assert isinstance(result, Ok)
    assert result.value.smoke.entry_point_ran is True
    assert fake_tools.kinds[-1] == "entry-point"


def test_entry_point_failure_is_swallowed(
    project: Project, console: MockConsole, fake_tools: FakeTools
) -> None:
    fake_tools.installed_scripts = ("demo",)
    fake_tools.fail["entry-point"] = 1

    result = _service(project, console).verify(PACKAGE, Target.pypi)

    assert isinstance(result, Ok)
    assert result.value.smoke.entry_point_ran is False
    assert not console.has_error()
