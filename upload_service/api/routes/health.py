"""Health check endpoint."""

import structlog
from fastapi import APIRouter, Depends

from upload_service import __version__
from upload_service.api.dependencies import get_settings
from upload_service.config import Settings

router = APIRouter()
logger = structlog.get_logger()


@router.get("/health")
async def health_check(app_settings: Settings = Depends(get_settings)):
    """
    Health check endpoint.

    Returns:
        Health status, version and the active upload limit
    """
    return {
        "status": "healthy",
        "version": __version__,
        "max_upload_size": str(app_settings.max_file_size_for_upload),
    }


# Note: /metrics endpoint is mounted directly in main.py using prometheus ASGI app
