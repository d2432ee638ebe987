"""Test doubles for the external packaging tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pubflow.core.result import Err, Ok, Result
from pubflow.platform.process import ProcessError

PYPROJECT = """\
[build-system]
requires = ["setuptools>=69"]
build-backend = "setuptools.build_meta"

[project]
name = "demo-pkg"
version = "1.2.3"

[project.scripts]
demo = "demo_pkg.cli:main"
"""

HOST_PYTHON = "/usr/bin/python3"


def classify(cmd: list[str]) -> str:
    """Name the pipeline command a fake invocation stands for."""
    args = cmd[1:]
    if args[:2] == ["-m", "venv"]:
        return "venv"
    if args[:2] == ["-m", "build"]:
        return "build"
    if args[:3] == ["-m", "twine", "check"]:
        return "check"
    if args[:3] == ["-m", "twine", "upload"]:
        return "upload"
    if args == ["-m", "pip", "install", "-U", "pip"]:
        return "venv-pip"
    if args[:4] == ["-m", "pip", "install", "-U"]:
        return "tools"
    if args[:4] == ["-m", "pip", "install", "--no-cache-dir"]:
        return "install"
    if args[:1] == ["-c"]:
        return "import"
    if args == ["--help"]:
        return "entry-point"
    return "other"


def _no_failures() -> dict[str, int]:
    return {}


def _no_calls() -> list[list[str]]:
    return []


@dataclass
class FakeTools:
    """Stands in for build, twine, pip and venv.

    ``fail`` maps a command kind (see ``classify``) to the exit code it
    should fail with. A successful ``build`` writes an sdist and a wheel
    for ``dist_version`` into ``<cwd>/dist``.
    """

    dist_version: str = "1.2.3"
    fail: dict[str, int] = field(default_factory=_no_failures)
    calls: list[list[str]] = field(default_factory=_no_calls)
    import_output: str = "/venv/lib/site-packages/demo_pkg/__init__.py\n"
    # Console scripts that a successful install drops next to the venv python.
    installed_scripts: tuple[str, ...] = ()

    @property
    def kinds(self) -> list[str]:
        return [classify(c) for c in self.calls]

    def calls_of(self, kind: str) -> list[list[str]]:
        return [c for c in self.calls if classify(c) == kind]

    def _failure(self, cmd: list[str], stderr: str = "") -> Err[ProcessError] | None:
        rc = self.fail.get(classify(cmd))
        if rc is None:
            return None
        return Err(ProcessError(command=tuple(cmd), returncode=rc, stdout="", stderr=stderr))

    def run_silent(
        self,
        cmd: list[str],
        cwd: Path | None = None,
        env: dict[str, str] | None = None,
        *,
        quiet: bool = False,
    ) -> Result[None, ProcessError]:
        self.calls.append(list(cmd))
        failure = self._failure(cmd)
        if failure is not None:
            return failure
        if classify(cmd) == "build" and cwd is not None:
            dist = cwd / "dist"
            dist.mkdir(exist_ok=True)
            (dist / f"demo_pkg-{self.dist_version}.tar.gz").write_text("sdist")
            (dist / f"demo_pkg-{self.dist_version}-py3-none-any.whl").write_text("wheel")
        if classify(cmd) == "install":
            bin_dir = Path(cmd[0]).parent
            bin_dir.mkdir(parents=True, exist_ok=True)
            for name in self.installed_scripts:
                (bin_dir / name).write_text("#!/bin/sh\n")
        return Ok(None)

    def run(
        self,
        cmd: list[str],
        cwd: Path | None = None,
        env: dict[str, str] | None = None,
    ) -> Result[str, ProcessError]:
        self.calls.append(list(cmd))
        failure = self._failure(cmd, stderr="ModuleNotFoundError: No module named 'demo_pkg'\n")
        if failure is not None:
            return failure
        return Ok(self.import_output)
