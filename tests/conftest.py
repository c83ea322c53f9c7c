"""Shared pytest fixtures and configuration for all tests."""

import io
import os

# Rate limiting is disabled for the test session; must be set before the app is imported
os.environ.setdefault("TESTING", "true")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from tests.mocks.mock_storage import FailingStorage, RecordingStorage  # noqa: E402
from upload_service.models.file_size import FileSize  # noqa: E402
from upload_service.models.upload import UploadRequest  # noqa: E402

# ==============================================================================
# Application Fixtures
# ==============================================================================


@pytest.fixture
def app():
    """Create FastAPI app instance for testing."""
    from upload_service.main import app

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def recording_storage():
    """Storage double that records calls and returns a fixed identifier."""
    return RecordingStorage()


@pytest.fixture
def failing_storage():
    """Storage double that always raises."""
    return FailingStorage()


@pytest.fixture
def client(app, recording_storage):
    """Synchronous test client with the storage backend replaced by a recorder."""
    from upload_service.api.dependencies import get_storage

    app.dependency_overrides[get_storage] = lambda: recording_storage

    with TestClient(app, raise_server_exceptions=True) as test_client:
        yield test_client


# ==============================================================================
# Upload Fixtures
# ==============================================================================


@pytest.fixture
def persons_csv_bytes():
    """Small semicolon-separated text file."""
    return (
        "FirstName;LastName;BirthDate\n"
        "     Philipp;Wagner;1986/05/12       \n"
        "Max;Mustermann;2014/01/01\n"
    ).encode("utf-8")


@pytest.fixture
def persons_file(tmp_path, persons_csv_bytes):
    """persons.txt written to a temporary directory."""
    file_path = tmp_path / "persons.txt"
    file_path.write_bytes(persons_csv_bytes)
    return file_path


@pytest.fixture
def two_megabytes():
    """The default upload limit."""
    return FileSize.create(2, FileSize.Unit.MEGABYTE)


@pytest.fixture
def create_upload_request(persons_csv_bytes):
    """Factory fixture for UploadRequest instances.

    Defaults describe a valid request; override any field by keyword.

    Example:
        >>> request = create_upload_request(title="")
    """

    def _create(**overrides) -> UploadRequest:
        values = {
            "title": "Title",
            "tags": ["Hans", "Wurst"],
            "description": "Description",
            "file_name": "persons.txt",
            "file_size": len(persons_csv_bytes),
            "file_content": io.BytesIO(persons_csv_bytes),
        }
        values.update(overrides)
        return UploadRequest(**values)

    return _create


@pytest.fixture
def upload_form():
    """Valid multipart form fields (without the file part)."""
    return {"title": "Title", "tags": "Hans,Wurst", "description": "Description"}


# ==============================================================================
# Temporary Directory Fixtures
# ==============================================================================


@pytest.fixture
def temp_upload_dir(tmp_path):
    """Temporary upload directory for storage tests."""
    upload_dir = tmp_path / "uploads"
    upload_dir.mkdir()
    return upload_dir
