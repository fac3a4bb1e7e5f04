"""
Base exception classes for the A-Safe backend.

Each module should define its own exceptions that inherit from these bases.
Every base carries the HTTP status it translates to, so the API layer can
render any of them without knowing the concrete subclass.
"""

from typing import Optional, Any


class AppError(Exception):
    """
    Base exception for all A-Safe errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the error envelope sent to clients."""
        return {"error": self.message}


class NotFoundError(AppError):
    """Resource not found."""

    status_code = 404


class ValidationError(AppError):
    """Input validation failed."""

    status_code = 400

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        errors: Optional[list[dict[str, str]]] = None,
    ):
        super().__init__(message, code, details)
        self.errors = errors or []

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        if self.errors:
            body["details"] = self.errors
        return body


class AuthenticationError(AppError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(AppError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class InternalError(AppError):
    """Unexpected failure that must not leak its cause to the client."""

    def __init__(self, message: str = "Internal Server Error", **kwargs: Any):
        super().__init__(message, **kwargs)


class ConfigurationError(AppError):
    """Required configuration is missing or malformed."""

    pass


class ExternalServiceError(AppError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
