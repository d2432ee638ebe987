from __future__ import annotations

from pathlib import Path

from pubflow.core.project import Project
from pubflow.core.result import Result
from pubflow.output.console import ConsoleProtocol
from pubflow.platform.process import ProcessError, run_silent


class BaseService:
    """Shared state for pipeline services.

    ``python`` is the absolute path of the host interpreter that drives
    pip, build, twine and venv.
    """

    def __init__(
        self,
        *,
        project: Project,
        python: str,
        console: ConsoleProtocol,
    ) -> None:
        self._project = project
        self._python = python
        self._console = console

    def _exec(
        self,
        cmd: list[str],
        *,
        cwd: Path | None = None,
        quiet: bool = False,
    ) -> Result[None, ProcessError]:
        """Echo and run a blocking command, by default from the project root."""
        self._console.command(cmd)
        return run_silent(cmd, cwd=cwd or self._project.root, quiet=quiet)
