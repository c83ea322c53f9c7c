"""Contract tests for the error response format."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from upload_service.api.dependencies import get_settings
from upload_service.config import Settings


def test_unknown_route_returns_not_found(client: TestClient):
    """Test that 404s use the Code/Details shape."""
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json()["Code"] == "NotFound"
    assert set(response.json()) == {"Code", "Details"}


def test_wrong_method_returns_http_error(client: TestClient):
    response = client.get("/file/upload")

    assert response.status_code == 405
    assert response.json()["Code"] == "HttpError"


def test_missing_api_key_returns_unauthorized(client: TestClient, upload_form):
    """Test that an enabled API key check rejects requests without a key."""
    with patch("upload_service.api.dependencies.settings") as mock_settings:
        mock_settings.api_key_enabled = True
        mock_settings.api_key_header_name = "X-API-Key"

        response = client.post("/file/upload", data=upload_form)

    assert response.status_code == 401
    assert response.json()["Code"] == "Unauthorized"
    assert response.headers["WWW-Authenticate"] == "ApiKey"


def test_valid_api_key_is_accepted(app, client: TestClient, upload_form, persons_csv_bytes):
    app.dependency_overrides[get_settings] = lambda: Settings()

    with patch("upload_service.api.dependencies.settings") as mock_settings:
        mock_settings.api_key_enabled = True
        mock_settings.api_keys_list = ["secret-key"]

        response = client.post(
            "/file/upload",
            headers={"X-API-Key": "secret-key"},
            data=upload_form,
            files={"file": ("persons.txt", persons_csv_bytes, "text/plain")},
        )

    assert response.status_code == 200
