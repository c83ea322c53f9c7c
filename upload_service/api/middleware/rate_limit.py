"""Rate limiting using slowapi."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from upload_service.config import settings

# Create rate limiter instance
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=settings.rate_limit_storage_uri,
    enabled=settings.rate_limit_enabled and not settings.testing,
)
