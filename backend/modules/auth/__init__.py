"""
Authentication module.

Handles registration, login, token issuing/verification, account CRUD,
password reset and email verification.

Public API:
- IAccountService: Interface for account operations
- TokenCodec: Issues and verifies session tokens
- Policies: allow_admin, allow_self_or_admin
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAccountService
from .models import (
    AuthenticatedUser,
    LoginResult,
    RegisterRequest,
    UpdateUserRequest,
    User,
    UserPublic,
)
from .tokens import TokenCodec
from .policies import allow_admin, allow_self_or_admin, ensure_allowed
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    ForbiddenError,
    AccountAccessDeniedError,
    UserNotFoundError,
    DuplicateEmailError,
)

__all__ = [
    # Interface
    "IAccountService",
    # Models
    "AuthenticatedUser",
    "LoginResult",
    "RegisterRequest",
    "UpdateUserRequest",
    "User",
    "UserPublic",
    # Tokens and policies
    "TokenCodec",
    "allow_admin",
    "allow_self_or_admin",
    "ensure_allowed",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "ForbiddenError",
    "AccountAccessDeniedError",
    "UserNotFoundError",
    "DuplicateEmailError",
]
