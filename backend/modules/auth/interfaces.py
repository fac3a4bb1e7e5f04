"""
Authentication module interface.

Other modules and the API layer should depend on IAccountService, not
the concrete implementation. This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import Role

from .models import (
    LoginResult,
    RegisterRequest,
    UpdateUserRequest,
    UserPublic,
)


@runtime_checkable
class IAccountService(Protocol):
    """
    Interface for account operations.

    Note the two failure disciplines: authenticate, get_one, verify_email
    and complete_password_reset report failure through their return value;
    the other operations raise.
    """

    async def register(self, request: RegisterRequest) -> UserPublic:
        """
        Create an account and send a verification email.

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        ...

    async def authenticate(self, email: str, password: str) -> LoginResult:
        """
        Exchange credentials for a token.

        Returns:
            LoginResult with a token on success, or token=None and a
            message on failure. Never raises for bad credentials.
        """
        ...

    async def get_all(self) -> list[UserPublic]:
        """List every account."""
        ...

    async def get_one(self, user_id: str) -> Optional[UserPublic]:
        """Get one account, or None if it doesn't exist."""
        ...

    async def update(
        self,
        user_id: str,
        patch: UpdateUserRequest,
        requesting_user_id: str,
        requesting_user_role: Role,
    ) -> UserPublic:
        """
        Apply a partial update.

        Raises:
            AccountAccessDeniedError: Unless the requester is the user or an admin
            UserNotFoundError: If the user doesn't exist
        """
        ...

    async def delete(self, user_id: str, requesting_user_role: Role) -> UserPublic:
        """
        Delete an account.

        Raises:
            AccountAccessDeniedError: Unless the requester is an admin
            UserNotFoundError: If the user doesn't exist
        """
        ...

    async def reset_password(self, email: str) -> None:
        """
        Issue a reset token and email the reset link.

        Raises:
            UserNotFoundError: If no account has this email
        """
        ...

    async def complete_password_reset(self, token: str, new_password: str) -> bool:
        """Consume a reset token and set a new password. False if the token is unknown."""
        ...

    async def verify_email(self, token: str) -> bool:
        """Mark the holder of a verification token as verified. False if unknown."""
        ...
