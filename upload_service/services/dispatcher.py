"""Upload dispatch: validate, hand off to storage, map the outcome."""

import time
from typing import Protocol

import structlog

from upload_service.models.errors import ServiceError, ServiceErrorCode
from upload_service.models.file_size import FileSize
from upload_service.models.upload import UploadRequest, UploadResult
from upload_service.services.storage.base import StorageCapability
from upload_service.utils import metrics
from upload_service.utils.validators import FILE, RequestValidator, ValidationOutcome

logger = structlog.get_logger()

INTERNAL_ERROR_DETAILS = "An internal error occurred while storing the file."


class SettingsProvider(Protocol):
    """Read-only source of the upload size limit."""

    @property
    def max_file_size_for_upload(self) -> FileSize: ...


class UploadDispatcher:
    """Validates upload requests and forwards accepted ones to storage."""

    def __init__(
        self,
        settings_provider: SettingsProvider,
        storage: StorageCapability,
        validator: RequestValidator | None = None,
    ):
        self.settings_provider = settings_provider
        self.storage = storage
        self.validator = validator or RequestValidator()

    async def dispatch(self, request: UploadRequest) -> UploadResult | ServiceError:
        """
        Process one upload request.

        Storage is only called for requests that pass validation, and at most
        once per request. Storage failures are reported as InternalError with
        a generic message; the cause is only logged.

        Args:
            request: Upload request built from the incoming form

        Returns:
            UploadResult on success, ServiceError otherwise
        """
        limit = self.settings_provider.max_file_size_for_upload
        outcome = self.validator.validate(request, limit)
        if outcome.is_valid and request.file_content is None:
            # Storage needs a stream whatever a substituted validator decided
            outcome = ValidationOutcome.invalid([FILE])

        if not outcome.is_valid:
            logger.warning(
                "upload_validation_failed",
                properties=list(outcome.invalid_properties),
                filename=request.file_name,
                size=request.file_size,
                limit_bytes=limit.bytes,
            )
            metrics.upload_requests_total.labels(outcome="validation_error").inc()
            return ServiceError.validation_failed(outcome.invalid_properties)

        start_time = time.perf_counter()
        try:
            identifier = await self.storage.store(request.file_name, request.file_content)
        except Exception as e:
            logger.error(
                "upload_storage_failed",
                filename=request.file_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            metrics.upload_requests_total.labels(outcome="internal_error").inc()
            return ServiceError(code=ServiceErrorCode.INTERNAL_ERROR, details=INTERNAL_ERROR_DETAILS)
        finally:
            metrics.upload_storage_duration_seconds.observe(time.perf_counter() - start_time)

        metrics.upload_requests_total.labels(outcome="success").inc()
        metrics.upload_file_size_bytes.observe(request.file_size)

        logger.info(
            "upload_accepted",
            identifier=identifier,
            filename=request.file_name,
            size=request.file_size,
            tags=request.tags,
        )
        return UploadResult(identifier=identifier)
