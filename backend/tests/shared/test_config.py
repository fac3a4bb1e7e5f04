"""Tests for shared/config.py."""

import os
from unittest.mock import patch

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self, monkeypatch):
        """Settings should have sensible defaults."""
        monkeypatch.delenv("JWT_SECRET", raising=False)
        monkeypatch.delenv("UPLOAD_DIR", raising=False)
        settings = Settings(_env_file=None)
        assert settings.app_name == "A-Safe API"
        assert settings.debug is False
        assert settings.port == 3003
        assert settings.jwt_secret == ""
        assert settings.jwt_expires_minutes == 60
        assert settings.upload_dir == "uploads"
        assert settings.max_upload_size == 10 * 1024 * 1024
        assert settings.upload_timeout_seconds == 120.0
        assert settings.sharemyimage_api_url == "https://www.sharemyimage.com/api/1/upload"

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000

    def test_loads_collaborator_config_from_env(self):
        """Supabase, SMTP and image host settings come from their namespaced variables."""
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
            "SMTP_HOST": "smtp.example.com",
            "SMTP_PORT": "2525",
            "SHAREMYIMAGE_API_KEY": "chv_test",
        }):
            settings = Settings(_env_file=None)
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_service_role_key == "test-service-key"
            assert settings.smtp_host == "smtp.example.com"
            assert settings.smtp_port == 2525
            assert settings.sharemyimage_api_key == "chv_test"

    def test_env_names_are_case_insensitive(self):
        with patch.dict(os.environ, {"jwt_expires_minutes": "5"}):
            settings = Settings(_env_file=None)
            assert settings.jwt_expires_minutes == 5


class TestGetSettings:
    def test_is_cached(self):
        """get_settings should return the same instance."""
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("APP_URL", "https://app.example.com")
        get_settings.cache_clear()
        second = get_settings()
        assert second is not first
        assert second.app_url == "https://app.example.com"
