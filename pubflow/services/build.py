"""Build stage: clean outputs, install tooling, build sdist and wheel."""

from __future__ import annotations

from pathlib import Path

from pubflow.core.config import DEFAULT_BUILD_TOOLS
from pubflow.core.result import Err, Ok, Result
from pubflow.output.console import Style
from pubflow.platform.files import remove_tree

from .base import BaseService
from .errors import ArtifactsMissing, BuildStageError, CleanFailed, StepFailed
from .model import Stage

__all__ = ["BuildService", "artifacts_for_version"]


class BuildService(BaseService):
    """Produces a fresh set of distributions under ``dist/``."""

    def clean(self) -> Result[list[Path], CleanFailed]:
        """Remove every build output directory; safe to repeat.

        Returns:
            Ok(paths) with the directories that existed and were removed
            Err(CleanFailed) if one of them could not be removed
        """
        removed: list[Path] = []
        for path in self._project.output_dirs():
            try:
                existed = remove_tree(path)
            except OSError as e:
                return Err(CleanFailed(path=path, detail=e.strerror or str(e)))
            if existed:
                self._console.print(f"  removed {path}", Style.DIM)
                removed.append(path)
        return Ok(removed)

    def ensure_tools(
        self, tools: tuple[str, ...] = DEFAULT_BUILD_TOOLS
    ) -> Result[None, StepFailed]:
        cmd = [self._python, "-m", "pip", "install", "-U", *tools]
        result = self._exec(cmd)
        if isinstance(result, Err):
            return Err(StepFailed(Stage.tools, tuple(cmd), result.error.returncode))
        return Ok(None)

    def build(self) -> Result[tuple[Path, ...], BuildStageError]:
        """Run the build frontend and collect what it produced.

        Returns:
            Ok(artifacts) with the files in ``dist/``
            Err(StepFailed) if the frontend fails
            Err(ArtifactsMissing) if it succeeds but leaves nothing behind
        """
        cmd = [self._python, "-m", "build"]
        result = self._exec(cmd)
        if isinstance(result, Err):
            return Err(StepFailed(Stage.build, tuple(cmd), result.error.returncode))

        artifacts = self.artifacts()
        if not artifacts:
            return Err(ArtifactsMissing(dist_dir=self._project.dist_dir))
        return Ok(artifacts)

    def artifacts(self) -> tuple[Path, ...]:
        dist = self._project.dist_dir
        if not dist.is_dir():
            return ()
        return tuple(p for p in sorted(dist.iterdir()) if p.is_file())


def artifacts_for_version(artifacts: tuple[Path, ...], version: str) -> tuple[Path, ...]:
    """Artifacts whose file name carries ``version``.

    Both sdist and wheel names have the form ``{name}-{version}...``.
    """
    marker = f"-{version}"
    return tuple(p for p in artifacts if marker in p.name)
