"""Data models for upload requests, results and errors."""

from upload_service.models.errors import ServiceError, ServiceErrorCode
from upload_service.models.file_size import FileSize, FileSizeUnit
from upload_service.models.upload import UploadRequest, UploadResult

__all__ = [
    "FileSize",
    "FileSizeUnit",
    "ServiceError",
    "ServiceErrorCode",
    "UploadRequest",
    "UploadResult",
]
