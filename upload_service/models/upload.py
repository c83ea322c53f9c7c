"""Upload models for file handling."""

from dataclasses import dataclass, field
from typing import BinaryIO

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class UploadRequest:
    """An incoming upload, built from the multipart form of one request.

    file_content is the raw stream handed to storage; it is never read
    during validation.
    """

    title: str = ""
    tags: list[str] = field(default_factory=list)
    description: str = ""
    file_name: str = ""
    file_size: int = 0
    file_content: BinaryIO | None = None

    @staticmethod
    def parse_tags(raw: str | None) -> list[str]:
        """Split a comma-separated tags field, dropping blank entries."""
        if not raw:
            return []
        return [tag.strip() for tag in raw.split(",") if tag.strip()]


class UploadResult(BaseModel):
    """Result of a successful upload."""

    identifier: str = Field(..., alias="Identifier", description="Identifier assigned by storage")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "Identifier": "3f0c6d3e-9a53-4cc8-8f0e-6f1d1c2a7b11",
            }
        },
    }
