"""FastAPI application entry point with lifecycle management."""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from prometheus_client import make_asgi_app

from upload_service import __version__
from upload_service.api.middleware.error_handler import add_exception_handlers
from upload_service.api.middleware.logging import LoggingMiddleware
from upload_service.api.middleware.rate_limit import limiter
from upload_service.api.routes import health, upload
from upload_service.config import settings

# Configure structured logging
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(settings.log_level)),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    logger.info(
        "application_starting",
        version=__version__,
        upload_dir=settings.upload_dir,
        max_upload_size=str(settings.max_file_size_for_upload),
        rate_limit_enabled=limiter.enabled,
        api_key_enabled=settings.api_key_enabled,
    )

    yield

    logger.info("application_shutdown_complete")


# Create FastAPI application
app = FastAPI(
    title="File Upload API",
    description="File upload service with request validation and pluggable storage",
    version=__version__,
    lifespan=lifespan,
)

# Rate limiter is looked up on app state by the slowapi decorators
app.state.limiter = limiter

# Add middleware
app.add_middleware(LoggingMiddleware)  # type: ignore[reportInvalidArgumentType]

# Add exception handlers
add_exception_handlers(app)

# Mount Prometheus metrics at /metrics
metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)

# Register routes
app.include_router(health.router, tags=["health"])
app.include_router(upload.router, tags=["upload"])


def run() -> None:
    """Serve the application with uvicorn using configured host and port."""
    import uvicorn

    uvicorn.run(
        "upload_service.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
