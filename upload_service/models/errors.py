"""Service error model shared by the dispatcher and the exception handlers."""

from enum import Enum

from pydantic import BaseModel, Field


class ServiceErrorCode(str, Enum):
    """Machine-readable error types."""

    VALIDATION_ERROR = "ValidationError"
    INTERNAL_ERROR = "InternalError"
    UNAUTHORIZED = "Unauthorized"
    NOT_FOUND = "NotFound"
    RATE_LIMIT_EXCEEDED = "RateLimitExceeded"
    HTTP_ERROR = "HttpError"


class ServiceError(BaseModel):
    """Standard error response format."""

    code: ServiceErrorCode = Field(..., alias="Code")
    details: str = Field(..., alias="Details")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "Code": "ValidationError",
                "Details": "Validation failed. Properties: (Title, Tags, File)",
            }
        },
    }

    @classmethod
    def validation_failed(cls, properties: list[str] | tuple[str, ...]) -> "ServiceError":
        """Build the error reported for a request that failed validation."""
        return cls(
            code=ServiceErrorCode.VALIDATION_ERROR,
            details=f"Validation failed. Properties: ({', '.join(properties)})",
        )

    def to_content(self) -> dict:
        """JSON body for this error."""
        return self.model_dump(mode="json", by_alias=True)
