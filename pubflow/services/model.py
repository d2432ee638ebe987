from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from pubflow.core.package import PackageDescriptor
from pubflow.core.target import Target


class Stage(StrEnum):
    """Pipeline stages, in execution order."""

    clean = "clean"
    tools = "tools"
    build = "build"
    check = "check"
    upload = "upload"
    verify = "verify"

    @property
    def number(self) -> int:
        return list(Stage).index(self) + 1

    @property
    def title(self) -> str:
        return _TITLES[self]

    def announcement(self) -> str:
        """Numbered status line printed before the stage runs."""
        return f"{self.number}) {self.title}"


_TITLES: dict[Stage, str] = {
    Stage.clean: "Cleaning build artifacts...",
    Stage.tools: "Ensuring build & twine are installed...",
    Stage.build: "Building sdist and wheel...",
    Stage.check: "Checking artifacts with twine...",
    Stage.upload: "Uploading...",
    Stage.verify: "Verifying installation in a fresh virtual environment...",
}


@dataclass(frozen=True, slots=True)
class SmokeResult:
    """Outcome of the best-effort checks; never fails a run."""

    imported_from: str | None
    entry_point_ran: bool


@dataclass(frozen=True, slots=True)
class VerifyReport:
    package: PackageDescriptor
    smoke: SmokeResult


@dataclass(frozen=True, slots=True)
class PublishReport:
    version: str
    target: Target
    artifacts: tuple[Path, ...]
    # None when verification was skipped.
    verification: VerifyReport | None
