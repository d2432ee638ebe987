"""Pipeline stages and their orchestration."""

from .build import BuildService
from .errors import PublishError
from .model import PublishReport, Stage
from .pipeline import PublishService, publish
from .upload import UploadService
from .verify import VerifyService

__all__ = [
    "BuildService",
    "PublishError",
    "PublishReport",
    "PublishService",
    "Stage",
    "UploadService",
    "VerifyService",
    "publish",
]
