"""
Shared infrastructure for A-Safe backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- email: SMTP transport
- log_config / error_tracking: Logging setup and error reporting

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    AppError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    InternalError,
    ConfigurationError,
    ExternalServiceError,
)
from .models import AuthenticatedUser, Role

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "AppError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "InternalError",
    "ConfigurationError",
    "ExternalServiceError",
    "AuthenticatedUser",
    "Role",
]
