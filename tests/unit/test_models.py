"""Unit tests for upload request, result and error models."""

import dataclasses

import pytest

from upload_service.models.errors import ServiceError, ServiceErrorCode
from upload_service.models.upload import UploadRequest, UploadResult


def test_upload_request_defaults_describe_empty_form():
    """Test that a default UploadRequest carries no data."""
    request = UploadRequest()

    assert request.title == ""
    assert request.tags == []
    assert request.file_content is None
    assert request.file_size == 0


def test_upload_request_is_immutable():
    request = UploadRequest(title="Title")

    with pytest.raises(dataclasses.FrozenInstanceError):
        request.title = "Other"  # type: ignore[misc]


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("Hans,Wurst", ["Hans", "Wurst"]),
        (" Hans , Wurst ", ["Hans", "Wurst"]),
        ("Hans,,Wurst,", ["Hans", "Wurst"]),
        ("single", ["single"]),
        ("", []),
        (" , ", []),
        (None, []),
    ],
)
def test_parse_tags(raw, expected):
    """Test splitting of the comma-separated tags field."""
    assert UploadRequest.parse_tags(raw) == expected


def test_upload_result_serializes_with_identifier_key():
    """Test that UploadResult is rendered as {"Identifier": ...}."""
    result = UploadResult(identifier="abc-123")

    assert result.model_dump(by_alias=True) == {"Identifier": "abc-123"}


def test_upload_result_accepts_alias():
    assert UploadResult(Identifier="abc").identifier == "abc"  # type: ignore[call-arg]


def test_service_error_serializes_with_code_and_details():
    """Test that ServiceError is rendered as {"Code": ..., "Details": ...}."""
    error = ServiceError(code=ServiceErrorCode.INTERNAL_ERROR, details="Something failed")

    assert error.to_content() == {"Code": "InternalError", "Details": "Something failed"}


def test_validation_failed_message_format():
    """Test the fixed format of the validation error details."""
    error = ServiceError.validation_failed(("Title", "Tags", "File"))

    assert error.code == ServiceErrorCode.VALIDATION_ERROR
    assert error.details == "Validation failed. Properties: (Title, Tags, File)"


def test_validation_failed_single_property():
    error = ServiceError.validation_failed(["File"])

    assert error.details == "Validation failed. Properties: (File)"


def test_service_error_code_values():
    assert ServiceErrorCode.VALIDATION_ERROR.value == "ValidationError"
    assert ServiceErrorCode.INTERNAL_ERROR.value == "InternalError"
