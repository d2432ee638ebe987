"""Project detection and paths.

A project is the directory pubflow is invoked from. It must hold a
``pyproject.toml`` at its root; there is no upward search, so running from a
subdirectory is an error rather than a surprise publish of the parent.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result

__all__ = ["Project", "ProjectError", "PYPROJECT_FILE", "detect_project"]

PYPROJECT_FILE = "pyproject.toml"


@dataclass(frozen=True, slots=True)
class ProjectError:
    """The working directory has no pyproject.toml at ``path``."""

    path: Path


@dataclass(frozen=True, slots=True)
class Project:
    """A Python project about to be built and published."""

    root: Path

    @property
    def pyproject_path(self) -> Path:
        return self.root / PYPROJECT_FILE

    @property
    def dist_dir(self) -> Path:
        """Where the build frontend writes sdist and wheel."""
        return self.root / "dist"

    @property
    def build_dir(self) -> Path:
        return self.root / "build"

    def egg_info_dirs(self) -> list[Path]:
        """``*.egg-info`` metadata directories left by setuptools.

        Both flat (``./*.egg-info``) and src layouts (``src/*.egg-info``).
        """
        found: list[Path] = []
        for base in (self.root, self.root / "src"):
            if base.is_dir():
                found.extend(p for p in sorted(base.glob("*.egg-info")) if p.is_dir())
        return found

    def output_dirs(self) -> list[Path]:
        """Every build output directory the clean step removes."""
        return [self.dist_dir, self.build_dir, *self.egg_info_dirs()]

    def __str__(self) -> str:
        return str(self.root)


def detect_project(start_dir: Path | None = None) -> Result[Project, ProjectError]:
    """Return the project rooted at ``start_dir`` (default: cwd)."""
    root = (start_dir or Path.cwd()).resolve()
    if not (root / PYPROJECT_FILE).is_file():
        return Err(ProjectError(path=root / PYPROJECT_FILE))
    return Ok(Project(root=root))
