"""FastAPI dependency providers for shared resources."""

import secrets
from functools import lru_cache

import structlog
from fastapi import Depends, HTTPException, Security, status
from fastapi.security import APIKeyHeader

from upload_service.config import Settings, settings
from upload_service.services.dispatcher import UploadDispatcher
from upload_service.services.storage.base import StorageCapability
from upload_service.services.storage.local import LocalDiskStorage

logger = structlog.get_logger()

# API Key security scheme (only used if authentication is enabled)
api_key_header_scheme = APIKeyHeader(name=settings.api_key_header_name, auto_error=False)


async def get_settings() -> Settings:
    """Get application settings."""
    return settings


@lru_cache
def _local_disk_storage(upload_dir: str) -> LocalDiskStorage:
    return LocalDiskStorage(upload_dir)


async def get_storage(app_settings: Settings = Depends(get_settings)) -> StorageCapability:
    """Get the storage backend uploads are handed to."""
    return _local_disk_storage(app_settings.upload_dir)


async def get_dispatcher(
    app_settings: Settings = Depends(get_settings),
    storage: StorageCapability = Depends(get_storage),
) -> UploadDispatcher:
    """Get an upload dispatcher bound to the current settings and storage."""
    return UploadDispatcher(settings_provider=app_settings, storage=storage)


def _reject_upload_client(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "ApiKey"},
    )


async def verify_api_key(api_key: str | None = Security(api_key_header_scheme)) -> str:
    """Authorize an upload client by API key, when authentication is enabled.

    Keys are compared in constant time. Returns the accepted key, or
    "auth_disabled" when the check is switched off.
    """
    if not settings.api_key_enabled:
        return "auth_disabled"

    header_name = settings.api_key_header_name
    if not api_key:
        logger.warning("upload_auth_key_missing", header_name=header_name)
        raise _reject_upload_client(f"API key required to upload files. Send it in the '{header_name}' header.")

    valid_keys = settings.api_keys_list
    if not valid_keys:
        # Misconfiguration, not a client error
        logger.error("upload_auth_no_keys_configured")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Upload authentication is enabled but no API keys are configured.",
        )

    supplied = api_key.encode()
    if not any(secrets.compare_digest(supplied, key.encode()) for key in valid_keys):
        logger.warning("upload_auth_key_rejected", key_length=len(api_key))
        raise _reject_upload_client("Invalid API key.")

    logger.debug("upload_auth_key_accepted")
    return api_key
