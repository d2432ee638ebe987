"""Identity of the distribution being published."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from .config import DEFAULT_ENTRY_POINT, DEFAULT_IMPORT_NAME, DEFAULT_PACKAGE_NAME, Settings
from .pyproject import project_name, project_scripts

__all__ = ["PackageDescriptor", "describe_package", "import_name_for"]

_SEPARATORS_RE = re.compile(r"[-_.]+")


@dataclass(frozen=True, slots=True)
class PackageDescriptor:
    """Name and version installed during verification.

    ``name`` and ``version`` must be exactly what was uploaded; ``import_name``
    and ``entry_point`` only drive the smoke test.
    """

    name: str
    version: str
    import_name: str
    entry_point: str

    @property
    def requirement(self) -> str:
        """Pinned requirement string, e.g. ``demo==1.2.3``."""
        return f"{self.name}=={self.version}"


def import_name_for(dist_name: str) -> str:
    """Best guess at the top-level module of a distribution."""
    return _SEPARATORS_RE.sub("_", dist_name).lower()


def describe_package(pyproject: Path, settings: Settings, version: str) -> PackageDescriptor:
    """Build the descriptor for a resolved version.

    Name: ``project.name``, else ``[tool.pubflow] package-name`` (which itself
    defaults to a built-in name). The import name and entry point follow the
    same rule: explicit setting, then project metadata, then the default.
    """
    declared = project_name(pyproject)
    name = declared or settings.package_name

    if settings.import_name:
        import_name = settings.import_name
    elif name == DEFAULT_PACKAGE_NAME:
        import_name = DEFAULT_IMPORT_NAME
    else:
        import_name = import_name_for(name)

    scripts = project_scripts(pyproject)
    entry_point = settings.entry_point or (scripts[0] if scripts else DEFAULT_ENTRY_POINT)

    return PackageDescriptor(
        name=name,
        version=version,
        import_name=import_name,
        entry_point=entry_point,
    )
