"""Core domain types and logic."""

from .config import RunConfig, Settings, load_settings, load_settings_or_default
from .errors import ErrorCode
from .package import PackageDescriptor, describe_package
from .project import Project, ProjectError, detect_project
from .pyproject import PyprojectError, resolve_version
from .result import Err, Ok, Result
from .target import Target

__all__ = [
    # config
    "RunConfig",
    "Settings",
    "load_settings",
    "load_settings_or_default",
    # errors
    "ErrorCode",
    # package
    "PackageDescriptor",
    "describe_package",
    # project
    "Project",
    "ProjectError",
    "detect_project",
    # pyproject
    "PyprojectError",
    "resolve_version",
    # result
    "Err",
    "Ok",
    "Result",
    # target
    "Target",
]
