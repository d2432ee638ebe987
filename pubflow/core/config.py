"""Run configuration and per-project settings.

``RunConfig`` is what the command line asked for. ``Settings`` comes from the
optional ``[tool.pubflow]`` table of the project being published:

    [tool.pubflow]
    python = "python3.12"
    package-name = "my-dist"
    import-name = "my_pkg"
    entry-point = "my-cli"
    build-tools = ["pip", "build", "twine"]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .pyproject import PyprojectError, read_pyproject
from .result import Err, Ok, Result
from .structured import StrDict, get_str, get_str_list, get_table
from .target import Target

__all__ = [
    "RunConfig",
    "Settings",
    "DEFAULT_PACKAGE_NAME",
    "DEFAULT_IMPORT_NAME",
    "DEFAULT_ENTRY_POINT",
    "DEFAULT_BUILD_TOOLS",
    "load_settings",
    "load_settings_or_default",
]

# Last-resort names, used only when neither project.name nor [tool.pubflow]
# provide one.
DEFAULT_PACKAGE_NAME = "allure-ai-analyzer"
DEFAULT_IMPORT_NAME = "allure_analyzer"
DEFAULT_ENTRY_POINT = "allure-analyze"

DEFAULT_BUILD_TOOLS = ("pip", "build", "twine")


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Command-line choices for one run."""

    target: Target
    skip_verify: bool = False
    version_override: str | None = None


@dataclass(frozen=True, slots=True)
class Settings:
    """Project-level settings from ``[tool.pubflow]``."""

    python: str | None = None
    package_name: str = DEFAULT_PACKAGE_NAME
    import_name: str | None = None
    entry_point: str | None = None
    build_tools: tuple[str, ...] = DEFAULT_BUILD_TOOLS

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Settings:
        """Create Settings from a parsed pyproject mapping."""
        tool: StrDict = get_table(data, "tool") or {}
        section: StrDict = get_table(tool, "pubflow") or {}

        return cls(
            python=get_str(section, "python"),
            package_name=get_str(section, "package-name") or DEFAULT_PACKAGE_NAME,
            import_name=get_str(section, "import-name"),
            entry_point=get_str(section, "entry-point"),
            build_tools=get_str_list(section, "build-tools") or DEFAULT_BUILD_TOOLS,
        )


def load_settings(path: Path) -> Result[Settings, PyprojectError]:
    """Load ``[tool.pubflow]`` from a pyproject.toml file.

    Args:
        path: Path to pyproject.toml

    Returns:
        Ok(Settings) on success, Err(PyprojectError) on failure
    """
    result = read_pyproject(path)
    if isinstance(result, Err):
        return result
    return Ok(Settings.from_dict(result.value))


def load_settings_or_default(path: Path) -> Settings:
    """Settings from the file, or defaults when it cannot be parsed.

    A broken pyproject.toml is not fatal here: the version resolver has its
    own textual fallback for that case.
    """
    result = load_settings(path)
    if isinstance(result, Ok):
        return result.value
    return Settings()
