"""Upload endpoint for file submission."""

import structlog
from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile as StarletteUploadFile

from upload_service.api.dependencies import get_dispatcher, verify_api_key
from upload_service.api.middleware.rate_limit import limiter
from upload_service.config import settings
from upload_service.models.errors import ServiceError, ServiceErrorCode
from upload_service.models.upload import UploadRequest, UploadResult
from upload_service.services.dispatcher import UploadDispatcher

router = APIRouter()
logger = structlog.get_logger()


def measure_upload(file: UploadFile) -> int:
    """Size of an uploaded file in bytes, without reading it into memory."""
    # Seek on the underlying SpooledTemporaryFile and rewind for storage
    file.file.seek(0, 2)
    file_size = file.file.tell()
    file.file.seek(0)
    return file_size


def build_upload_request(
    file: UploadFile | str | None,
    title: str | None,
    tags: str | None,
    description: str | None,
) -> UploadRequest:
    """Map multipart form fields onto an UploadRequest.

    A file field sent as plain text carries no upload and counts as a missing file.
    """
    if not isinstance(file, StarletteUploadFile):
        return UploadRequest(
            title=title or "",
            tags=UploadRequest.parse_tags(tags),
            description=description or "",
        )

    return UploadRequest(
        title=title or "",
        tags=UploadRequest.parse_tags(tags),
        description=description or "",
        file_name=file.filename or "",
        file_size=measure_upload(file),
        file_content=file.file,
    )


@router.post(
    "/file/upload",
    response_model=UploadResult,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ServiceError, "description": "Validation failed"},
        401: {"model": ServiceError, "description": "Missing or invalid API key"},
        429: {"model": ServiceError, "description": "Rate limit exceeded"},
        500: {"model": ServiceError, "description": "Storage failed"},
    },
)
@limiter.limit(settings.rate_limit_upload)
async def upload_file(
    request: Request,
    file: UploadFile | str | None = File(None, description="File to upload"),
    title: str | None = Form(None, description="Title of the file (required)"),
    tags: str | None = Form(
        None,
        description="Comma-separated tags (at least one required)",
        examples=["Hans,Wurst"],
    ),
    description: str | None = Form(None, description="Optional description"),
    dispatcher: UploadDispatcher = Depends(get_dispatcher),
    api_key: str = Depends(verify_api_key),
):
    """
    Upload a file with its metadata.

    The request is validated against the configured maximum upload size and
    the required fields (title, tags, file) before anything is stored.

    Returns the identifier assigned by the storage backend.
    """
    upload_request = build_upload_request(file, title, tags, description)
    result = await dispatcher.dispatch(upload_request)

    if isinstance(result, UploadResult):
        return JSONResponse(status_code=status.HTTP_200_OK, content=result.model_dump(by_alias=True))

    status_code = (
        status.HTTP_400_BAD_REQUEST
        if result.code == ServiceErrorCode.VALIDATION_ERROR
        else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return JSONResponse(status_code=status_code, content=result.to_content())
