"""Tests for the health endpoint."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient


class TestHealth:
    def test_health_check(self, app):
        """Health check should return OK without authentication."""
        response = TestClient(app).get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "OK"}

    def test_api_prefix(self, monkeypatch):
        from api.app import create_app
        from shared.config import get_settings

        monkeypatch.setenv("API_PREFIX", "/api")
        get_settings.cache_clear()

        client = TestClient(create_app())

        assert client.get("/api/health").status_code == 200
        assert client.get("/health").status_code == 404


class TestApplication:
    def test_openapi_documents_error_envelope(self, app):
        schemas = app.openapi()["components"]["schemas"]
        assert "ErrorResponse" in schemas
        assert "ValidationErrorResponse" in schemas

    @patch("api.app.configure_logging")
    @patch("shared.database.get_supabase_client")
    def test_lifespan_opens_and_releases_resources(self, mock_client, mock_logging, app):
        from api.dependencies import get_container

        with TestClient(app) as client:
            assert client.get("/health").status_code == 200
            mock_client.assert_called_once()
            mock_logging.assert_called_once()
            assert get_container()._db is not None

        assert get_container()._db is None

    @patch("api.app.configure_logging")
    def test_startup_fails_without_jwt_secret(self, mock_logging, monkeypatch, app):
        from shared.config import get_settings
        from shared.exceptions import ConfigurationError

        monkeypatch.setenv("JWT_SECRET", "")
        get_settings.cache_clear()

        with pytest.raises(ConfigurationError):
            with TestClient(app):
                pass
