"""Reading version and metadata out of ``pyproject.toml``.

The version is looked up in three places, first hit wins:

1. an explicit override from the command line;
2. ``project.version`` from a structured TOML parse;
3. the first ``version = "X.Y.Z"`` line of the raw text.

The textual fallback exists for files the structured read cannot use, e.g.
a syntactically broken file or a version kept outside ``[project]``.
"""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "PyprojectError",
    "read_pyproject",
    "version_from_data",
    "version_from_text",
    "resolve_version",
    "project_name",
    "project_scripts",
]

_VERSION_LINE_RE = re.compile(r"^\s*version\s*=")
_TRIPLE_RE = re.compile(r"=\s*[\"']?(\d+\.\d+\.\d+)")


@dataclass(frozen=True, slots=True)
class PyprojectError:
    """Error when pyproject.toml cannot be read or parsed."""

    message: str
    path: Path | None = None


def read_pyproject(path: Path) -> Result[StrDict, PyprojectError]:
    """Parse a TOML file into a string-keyed dict."""
    try:
        content = path.read_bytes()
        data = as_str_dict(tomllib.loads(content.decode("utf-8")))
        if data is None:
            return Err(PyprojectError("TOML root must be a table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(PyprojectError(f"File not found: {path}", path=path))
    except PermissionError:
        return Err(PyprojectError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(PyprojectError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(PyprojectError(f"Error reading {path}: {e}", path=path))


def version_from_data(data: StrDict) -> str | None:
    project = get_table(data, "project") or {}
    return get_str(project, "version")


def version_from_text(text: str) -> str | None:
    """Extract ``X.Y.Z`` from the first line assigning ``version``.

    Only that first assignment is considered; if it does not carry a dotted
    numeric triple the result is None.
    """
    for line in text.splitlines():
        if not _VERSION_LINE_RE.match(line):
            continue
        m = _TRIPLE_RE.search(line)
        return m.group(1) if m else None
    return None


def resolve_version(path: Path, *, override: str | None = None) -> str | None:
    """Resolve the version to publish, or None if no source yields one."""
    if override:
        return override

    parsed = read_pyproject(path)
    if isinstance(parsed, Ok):
        version = version_from_data(parsed.value)
        if version:
            return version

    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None
    return version_from_text(text)


def project_name(path: Path) -> str | None:
    """``project.name``, or None if the file is missing or unreadable."""
    parsed = read_pyproject(path)
    if isinstance(parsed, Err):
        return None
    project = get_table(parsed.value, "project") or {}
    return get_str(project, "name")


def project_scripts(path: Path) -> tuple[str, ...]:
    """Console script names declared under ``[project.scripts]``, in file order."""
    parsed = read_pyproject(path)
    if isinstance(parsed, Err):
        return ()
    project = get_table(parsed.value, "project") or {}
    scripts = get_table(project, "scripts") or {}
    return tuple(scripts.keys())
