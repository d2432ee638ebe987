"""The publish pipeline.

Stages run strictly in order and the first ``Err`` ends the run:

    clean -> tools -> build -> check -> upload -> [verify]

Nothing is retried or rolled back. Re-running is safe up to the upload,
which most indexes reject for a version that already exists.
"""

from __future__ import annotations

from pubflow.core.config import RunConfig, Settings
from pubflow.core.package import describe_package
from pubflow.core.project import Project
from pubflow.core.pyproject import resolve_version
from pubflow.core.result import Err, Ok, Result
from pubflow.output.console import ConsoleProtocol, Style
from pubflow.platform.python import find_python, interpreter_candidates

from .base import BaseService
from .build import BuildService, artifacts_for_version
from .errors import PublishError, PythonMissing, VersionUndetermined
from .model import PublishReport, Stage
from .upload import UploadService
from .verify import VerifyService

__all__ = ["PublishService", "publish"]


class PublishService(BaseService):
    def __init__(
        self,
        *,
        project: Project,
        python: str,
        console: ConsoleProtocol,
        settings: Settings,
    ) -> None:
        super().__init__(project=project, python=python, console=console)
        self._settings = settings
        self._build = BuildService(project=project, python=python, console=console)
        self._upload = UploadService(project=project, python=python, console=console)
        self._verify = VerifyService(project=project, python=python, console=console)

    def run(self, config: RunConfig, version: str) -> Result[PublishReport, PublishError]:
        self._announce(Stage.clean)
        cleaned = self._build.clean()
        if isinstance(cleaned, Err):
            return cleaned

        self._announce(Stage.tools)
        tools = self._build.ensure_tools(self._settings.build_tools)
        if isinstance(tools, Err):
            return tools

        self._announce(Stage.build)
        built = self._build.build()
        if isinstance(built, Err):
            return built
        artifacts = built.value

        if not artifacts_for_version(artifacts, version):
            self._console.warning(
                f"no artifact in {self._project.dist_dir} carries version {version}; "
                "verification will install exactly that version"
            )

        self._announce(Stage.check)
        checked = self._upload.check(artifacts)
        if isinstance(checked, Err):
            return checked

        self._announce(Stage.upload)
        uploaded = self._upload.upload(artifacts, config.target)
        if isinstance(uploaded, Err):
            return uploaded

        if config.skip_verify:
            return Ok(PublishReport(version, config.target, artifacts, verification=None))

        self._announce(Stage.verify)
        package = describe_package(self._project.pyproject_path, self._settings, version)
        verified = self._verify.verify(package, config.target)
        if isinstance(verified, Err):
            return verified

        return Ok(PublishReport(version, config.target, artifacts, verification=verified.value))

    def _announce(self, stage: Stage) -> None:
        self._console.step(stage.announcement())


def publish(
    *,
    project: Project,
    settings: Settings,
    config: RunConfig,
    console: ConsoleProtocol,
) -> Result[PublishReport, PublishError]:
    """Resolve the interpreter and version, then run every stage."""
    python = find_python(settings.python)
    if python is None:
        return Err(PythonMissing(candidates=interpreter_candidates(settings.python)))

    version = resolve_version(project.pyproject_path, override=config.version_override)
    if not version:
        return Err(VersionUndetermined(path=project.pyproject_path))

    console.print(f"Publishing version: {version} ({config.target})", Style.BOLD)

    service = PublishService(project=project, python=python, console=console, settings=settings)
    return service.run(config, version)
