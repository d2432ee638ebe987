from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .model import Stage


@dataclass(frozen=True, slots=True)
class ConfigMissing:
    path: Path


@dataclass(frozen=True, slots=True)
class VersionUndetermined:
    path: Path
    hint: str = "use --version X.Y.Z"


@dataclass(frozen=True, slots=True)
class PythonMissing:
    candidates: tuple[str, ...]
    hint: str = "set PYBIN or [tool.pubflow] python to an interpreter on PATH"


@dataclass(frozen=True, slots=True)
class CleanFailed:
    path: Path
    detail: str


@dataclass(frozen=True, slots=True)
class StepFailed:
    stage: Stage
    command: tuple[str, ...]
    returncode: int


@dataclass(frozen=True, slots=True)
class ArtifactsMissing:
    dist_dir: Path


VerifyStep = Literal["workspace", "venv", "pip", "install"]


@dataclass(frozen=True, slots=True)
class VerifyFailed:
    step: VerifyStep
    returncode: int
    detail: str = ""


BuildStageError = StepFailed | ArtifactsMissing

PublishError = (
    ConfigMissing
    | VersionUndetermined
    | PythonMissing
    | CleanFailed
    | StepFailed
    | ArtifactsMissing
    | VerifyFailed
)
