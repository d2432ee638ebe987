"""Validation and upload stages (twine)."""

from __future__ import annotations

from pathlib import Path

from pubflow.core.result import Err, Ok, Result
from pubflow.core.target import Target

from .base import BaseService
from .errors import StepFailed
from .model import Stage

__all__ = ["UploadService"]


class UploadService(BaseService):
    def check(self, artifacts: tuple[Path, ...]) -> Result[None, StepFailed]:
        """``twine check`` over every artifact; the last gate before the network."""
        cmd = [self._python, "-m", "twine", "check", *(str(p) for p in artifacts)]
        result = self._exec(cmd)
        if isinstance(result, Err):
            return Err(StepFailed(Stage.check, tuple(cmd), result.error.returncode))
        return Ok(None)

    def upload(self, artifacts: tuple[Path, ...], target: Target) -> Result[None, StepFailed]:
        """Push all artifacts in one ``twine upload`` call. No retry."""
        cmd = [
            self._python,
            "-m",
            "twine",
            "upload",
            *target.twine_args,
            *(str(p) for p in artifacts),
        ]
        result = self._exec(cmd)
        if isinstance(result, Err):
            return Err(StepFailed(Stage.upload, tuple(cmd), result.error.returncode))
        return Ok(None)
