"""Application configuration using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from upload_service.models.file_size import FileSize, FileSizeUnit


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # File Storage
    upload_dir: str = Field(
        default="./data/uploads",
        description="Directory the local disk storage writes uploaded files to",
    )
    max_upload_size_value: int = Field(
        default=2,
        description="Maximum upload size, expressed in max_upload_size_unit",
        ge=0,
    )
    max_upload_size_unit: FileSizeUnit = Field(
        default=FileSizeUnit.MEGABYTE,
        description="Unit of max_upload_size_value (Byte, Kilobyte, Megabyte, Gigabyte)",
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    # Development
    debug: bool = False

    # Security - Authentication
    api_key_enabled: bool = Field(
        default=False,
        description="Enable API key authentication (recommended for production)",
    )
    api_keys: str = Field(
        default="",
        description="Comma-separated list of valid API keys (use env var for production)",
    )
    api_key_header_name: str = Field(
        default="X-API-Key",
        description="HTTP header name for API key",
    )

    # Security - Rate Limiting
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable rate limiting (recommended for production)",
    )
    rate_limit_storage_uri: str = Field(
        default="memory://",
        description="Storage backend for rate limiting. Use 'redis://host:port' for multi-worker deployments",
    )
    rate_limit_upload: str = Field(
        default="30/minute",
        description="Rate limit for the upload endpoint (e.g., '100/hour', '10/minute')",
    )
    testing: bool = Field(
        default=False,
        description="Testing mode (disables rate limiting)",
    )

    @property
    def api_keys_list(self) -> list[str]:
        """Parse comma-separated API keys into list."""
        if not self.api_keys:
            return []
        return [key.strip() for key in self.api_keys.split(",") if key.strip()]

    @property
    def max_file_size_for_upload(self) -> FileSize:
        """Configured upload limit as a FileSize value object."""
        return FileSize.create(self.max_upload_size_value, self.max_upload_size_unit)

    @property
    def max_upload_size_bytes(self) -> int:
        """Convert the configured upload limit to bytes."""
        return self.max_file_size_for_upload.bytes


# Global settings instance
settings = Settings()
