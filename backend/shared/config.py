"""
Centralized configuration for the A-Safe backend.

All settings are loaded from environment variables with sensible defaults.
Collaborator settings are namespaced (e.g., SMTP_*, SUPABASE_*, SHAREMYIMAGE_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "A-Safe API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = ""

    # Server
    host: str = "0.0.0.0"
    port: int = 3003
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Tokens and passwords
    jwt_secret: str = ""
    jwt_expires_minutes: int = 60
    bcrypt_rounds: int = 10

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Email transport
    smtp_host: str = "localhost"
    smtp_port: int = 587
    smtp_username: str = ""
    smtp_password: str = ""
    smtp_use_tls: bool = True
    email_from: str = "no-reply@localhost"

    # Frontend URL used in verification and reset links
    app_url: str = "http://localhost:5173"

    # Image host (ShareMyImage)
    sharemyimage_api_key: str = ""
    sharemyimage_api_url: str = "https://www.sharemyimage.com/api/1/upload"

    # Uploads
    upload_dir: str = "uploads"
    max_upload_size: int = 10 * 1024 * 1024  # bytes
    upload_timeout_seconds: float = 120.0

    # Notifications
    notification_max_page_size: int = 100


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
