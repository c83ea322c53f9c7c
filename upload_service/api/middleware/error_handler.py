"""Exception handlers to convert exceptions to ServiceError JSON responses."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from upload_service.models.errors import ServiceError, ServiceErrorCode

logger = structlog.get_logger()

STATUS_CODES = {
    status.HTTP_400_BAD_REQUEST: ServiceErrorCode.VALIDATION_ERROR,
    status.HTTP_401_UNAUTHORIZED: ServiceErrorCode.UNAUTHORIZED,
    status.HTTP_404_NOT_FOUND: ServiceErrorCode.NOT_FOUND,
    status.HTTP_429_TOO_MANY_REQUESTS: ServiceErrorCode.RATE_LIMIT_EXCEEDED,
    status.HTTP_500_INTERNAL_SERVER_ERROR: ServiceErrorCode.INTERNAL_ERROR,
}


def error_response(status_code: int, error: ServiceError, headers: dict | None = None) -> JSONResponse:
    """Render a ServiceError with the given status code."""
    return JSONResponse(status_code=status_code, content=error.to_content(), headers=headers)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle HTTP exceptions (preserve status code)."""
    # Type guard instead of assert (asserts are disabled with -O flag)
    if not isinstance(exc, StarletteHTTPException):
        return await generic_exception_handler(request, exc)

    code = STATUS_CODES.get(exc.status_code, ServiceErrorCode.HTTP_ERROR)
    return error_response(
        exc.status_code,
        ServiceError(code=code, details=str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def _property_name(loc: tuple | list) -> str:
    """Turn an error location like ('body', 'title') into 'Title'."""
    parts = [str(part) for part in loc if part not in ("body", "query", "path", "header")]
    name = ".".join(parts) if parts else "body"
    return name[:1].upper() + name[1:]


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle request parsing errors raised by FastAPI (400)."""
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    logger.warning("request_validation_error", errors=errors, path=request.url.path)

    properties: list[str] = []
    for error in errors:
        name = _property_name(error.get("loc", ()))
        if name not in properties:
            properties.append(name)

    return error_response(status.HTTP_400_BAD_REQUEST, ServiceError.validation_failed(properties))


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions (500)."""
    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
    )

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ServiceError(code=ServiceErrorCode.INTERNAL_ERROR, details="Internal server error"),
    )


def add_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers to the FastAPI app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
