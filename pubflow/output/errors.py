"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pubflow.core.errors import ErrorCode, tool_exit_code
from pubflow.output.console import Style
from pubflow.services.errors import (
    ArtifactsMissing,
    CleanFailed,
    ConfigMissing,
    PublishError,
    PythonMissing,
    StepFailed,
    VersionUndetermined,
    VerifyFailed,
)

if TYPE_CHECKING:
    from pubflow.output.console import ConsoleProtocol

__all__ = ["print_publish_error", "publish_error_exit_code"]


def print_publish_error(error: PublishError, console: ConsoleProtocol) -> None:
    """Print a pipeline error to the console."""
    match error:
        case ConfigMissing(path=path):
            console.error(f"{path.name} not found in current directory.")
        case VersionUndetermined(path=path, hint=hint):
            console.error(f"Could not determine version from {path.name}; {hint}")
        case PythonMissing(candidates=candidates, hint=hint):
            console.error(f"python not found (tried: {', '.join(candidates)})")
            console.print(f"hint: {hint}", Style.DIM)
        case CleanFailed(path=path, detail=detail):
            console.error(f"clean failed: could not remove {path}: {detail}")
        case StepFailed(stage=stage, returncode=rc):
            console.error(f"{stage} failed (exit {rc})")
        case ArtifactsMissing(dist_dir=dist_dir):
            console.error(f"build produced no artifacts in {dist_dir}")
        case VerifyFailed(step=step, returncode=rc, detail=detail):
            suffix = f": {detail}" if detail else ""
            console.error(f"verification failed at {step} (exit {rc}){suffix}")


def publish_error_exit_code(error: PublishError) -> int:
    """Exit code for a pipeline error.

    Precondition errors use the usage code; tool failures propagate the
    tool's own status.
    """
    match error:
        case ConfigMissing() | VersionUndetermined() | PythonMissing():
            return int(ErrorCode.USAGE_ERROR)
        case StepFailed(returncode=rc) | VerifyFailed(returncode=rc):
            return tool_exit_code(rc)
        case CleanFailed() | ArtifactsMissing():
            return int(ErrorCode.FAILURE)
