"""Upload request validation for required fields and size limits."""

from dataclasses import dataclass

from upload_service.models.file_size import FileSize
from upload_service.models.upload import UploadRequest

# Property names in declaration order; failures are always reported in this order.
TITLE = "Title"
TAGS = "Tags"
FILE = "File"
PROPERTY_ORDER = (TITLE, TAGS, FILE)


@dataclass(frozen=True)
class ValidationOutcome:
    """Either valid, or invalid with the names of the failing properties."""

    invalid_properties: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.invalid_properties

    @classmethod
    def valid(cls) -> "ValidationOutcome":
        return cls()

    @classmethod
    def invalid(cls, properties: list[str] | tuple[str, ...]) -> "ValidationOutcome":
        ordered = tuple(name for name in PROPERTY_ORDER if name in properties)
        return cls(invalid_properties=ordered)


def validate_title(title: str | None) -> bool:
    return bool(title and title.strip())


def validate_tags(tags: list[str] | None) -> bool:
    return bool(tags) and any(tag.strip() for tag in tags)


def validate_file(request: UploadRequest, limit: FileSize) -> bool:
    """
    Validate the file part is present, non-empty and within the limit.

    A zero-byte upload is treated the same as a missing file part.

    Args:
        request: Upload request carrying the file stream and its size
        limit: Maximum allowed size

    Returns:
        True if the file is acceptable
    """
    if request.file_content is None or request.file_size <= 0:
        return False
    return request.file_size <= limit.bytes


class RequestValidator:
    """Checks an upload request against required fields and the size limit."""

    def validate(self, request: UploadRequest, limit: FileSize) -> ValidationOutcome:
        """
        Validate an upload request.

        Every check runs; all failing properties are collected and
        reported in declaration order (Title, Tags, File).

        Args:
            request: Upload request to check
            limit: Maximum allowed file size

        Returns:
            ValidationOutcome listing the failing properties, if any
        """
        failed: list[str] = []

        if not validate_file(request, limit):
            failed.append(FILE)
        if not validate_tags(request.tags):
            failed.append(TAGS)
        if not validate_title(request.title):
            failed.append(TITLE)

        if not failed:
            return ValidationOutcome.valid()
        return ValidationOutcome.invalid(failed)
