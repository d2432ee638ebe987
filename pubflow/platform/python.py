"""Locating Python interpreters on the host and inside virtual environments."""

from __future__ import annotations

import os
import shutil
from collections.abc import Mapping
from pathlib import Path

__all__ = [
    "PYBIN_ENV",
    "FALLBACK_INTERPRETERS",
    "interpreter_candidates",
    "find_python",
    "is_windows",
    "venv_bin_dir",
    "venv_python",
    "venv_script",
]

PYBIN_ENV = "PYBIN"
FALLBACK_INTERPRETERS = ("python3", "python")


def is_windows() -> bool:
    return os.name == "nt"


def interpreter_candidates(
    preferred: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> tuple[str, ...]:
    """Interpreters to try, in order: ``$PYBIN``, the configured one, defaults."""
    env = os.environ if environ is None else environ
    out: list[str] = []
    for candidate in (env.get(PYBIN_ENV), preferred, *FALLBACK_INTERPRETERS):
        if candidate and candidate not in out:
            out.append(candidate)
    return tuple(out)


def find_python(
    preferred: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Resolve the first available interpreter to an absolute path."""
    for candidate in interpreter_candidates(preferred, environ):
        found = shutil.which(candidate)
        if found:
            return found
    return None


def venv_bin_dir(venv_dir: Path) -> Path:
    """``bin/`` (POSIX) or ``Scripts/`` (Windows) of a virtual environment."""
    return venv_dir / ("Scripts" if is_windows() else "bin")


def venv_python(venv_dir: Path) -> Path:
    return venv_bin_dir(venv_dir) / ("python.exe" if is_windows() else "python")


def venv_script(venv_dir: Path, name: str) -> Path:
    """Path of a console script installed into a virtual environment."""
    return venv_bin_dir(venv_dir) / (f"{name}.exe" if is_windows() else name)
