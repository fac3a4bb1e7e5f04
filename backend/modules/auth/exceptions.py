"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, code="MISSING_TOKEN")


class ForbiddenError(AuthorizationError):
    """Raised when the caller's role is not allowed on a route."""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, code="FORBIDDEN")


class AccountAccessDeniedError(AuthorizationError):
    """Raised when a user tries to act on an account they don't control."""

    def __init__(self, user_id: str, action: str):
        super().__init__(
            f"Not allowed to {action} this user",
            code="ACCOUNT_ACCESS_DENIED",
            details={"user_id": user_id, "action": action},
        )


class UserNotFoundError(NotFoundError):
    """Raised when a user lookup misses."""

    def __init__(self, identifier: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"identifier": identifier},
        )


class DuplicateEmailError(ValidationError):
    """Raised when registering or switching to an email that is taken."""

    def __init__(self, email: str):
        super().__init__(
            "Email already exists",
            code="DUPLICATE_EMAIL",
            details={"email": email},
        )
