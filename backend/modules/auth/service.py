"""
Account service implementation.

Business logic for registration, login, account CRUD, password reset
and email verification. Storage goes through UserRepository; tokens
through TokenCodec; email through IEmailSender.
"""

import logging
import uuid
from typing import Any, Optional

from shared.email import IEmailSender
from shared.error_tracking import capture_exception
from shared.exceptions import ExternalServiceError
from shared.models import Role

from .exceptions import DuplicateEmailError, UserNotFoundError
from .interfaces import IAccountService
from .models import (
    LoginResult,
    RegisterRequest,
    UpdateUserRequest,
    UserPublic,
)
from .passwords import PasswordHasher
from .policies import Requester, allow_admin, allow_self_or_admin, ensure_allowed
from .repository import UserRepository
from .tokens import TokenCodec

logger = logging.getLogger(__name__)


class AccountService(IAccountService):
    """
    Implementation of the account service.

    Owns every mutation of user records.
    """

    def __init__(
        self,
        repository: UserRepository,
        hasher: PasswordHasher,
        codec: TokenCodec,
        email: IEmailSender,
        app_url: str,
    ):
        self._users = repository
        self._hasher = hasher
        self._codec = codec
        self._email = email
        self._app_url = app_url.rstrip("/")

    # -------------------------------------------------------------------------
    # Registration and login
    # -------------------------------------------------------------------------

    async def register(self, request: RegisterRequest) -> UserPublic:
        if self._users.get_by_email(request.email) is not None:
            raise DuplicateEmailError(request.email)

        verification_token = str(uuid.uuid4())
        user = self._users.create({
            "email": request.email,
            "name": request.name,
            "password": await self._hasher.hash(request.password),
            "role": Role.USER.value,
            "email_verified": False,
            "email_verification_token": verification_token,
        })
        logger.info(f"Registered user {user.id}")

        link = f"{self._app_url}/verify-email/{verification_token}"
        await self._send_quietly(
            user.email,
            "Verify your email",
            f"Please verify your email by clicking this link: {link}",
        )
        return user.to_public()

    async def authenticate(self, email: str, password: str) -> LoginResult:
        user = self._users.get_by_email(email)
        if user is None:
            return LoginResult(token=None, message="User not found")

        if not user.email_verified:
            return LoginResult(token=None, message="Email not verified")

        try:
            valid = await self._hasher.verify(password, user.password)
        except Exception as e:
            logger.exception(f"Password comparison failed for user {user.id}")
            capture_exception(e)
            return LoginResult(token=None, message="Internal server error")

        if not valid:
            return LoginResult(token=None, message="Invalid password")

        token = self._codec.issue({"id": user.id, "email": user.email, "role": user.role})
        return LoginResult(token=token, user=user.to_public())

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def get_all(self) -> list[UserPublic]:
        return [user.to_public() for user in self._users.list_all()]

    async def get_one(self, user_id: str) -> Optional[UserPublic]:
        user = self._users.get_by_id(user_id)
        return user.to_public() if user else None

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    async def update(
        self,
        user_id: str,
        patch: UpdateUserRequest,
        requesting_user_id: str,
        requesting_user_role: Role,
    ) -> UserPublic:
        ensure_allowed(
            allow_self_or_admin,
            Requester(id=requesting_user_id, role=requesting_user_role),
            user_id,
            action="update",
        )

        data: dict[str, Any] = {}
        if patch.email:
            owner = self._users.get_by_email(patch.email)
            if owner is not None and owner.id != user_id:
                raise DuplicateEmailError(patch.email)
            data["email"] = patch.email
        if patch.name:
            data["name"] = patch.name
        if patch.password:
            data["password"] = await self._hasher.hash(patch.password)

        if not data:
            user = self._users.get_by_id(user_id)
        else:
            user = self._users.update(user_id, data)
        if user is None:
            raise UserNotFoundError(user_id)
        return user.to_public()

    async def delete(self, user_id: str, requesting_user_role: Role) -> UserPublic:
        # Only the role matters here; the id is not checked against the target.
        ensure_allowed(
            allow_admin,
            Requester(id="", role=requesting_user_role),
            user_id,
            action="delete",
        )

        user = self._users.delete(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        logger.info(f"Deleted user {user_id}")
        return user.to_public()

    # -------------------------------------------------------------------------
    # Password reset and email verification
    # -------------------------------------------------------------------------

    async def reset_password(self, email: str) -> None:
        user = self._users.get_by_email(email)
        if user is None:
            raise UserNotFoundError(email)

        reset_token = str(uuid.uuid4())
        self._users.update(user.id, {"reset_password_token": reset_token})

        link = f"{self._app_url}/reset-password/{reset_token}"
        await self._send_quietly(
            email,
            "Reset your password",
            f"Click this link to reset your password: {link}",
        )

    async def complete_password_reset(self, token: str, new_password: str) -> bool:
        user = self._users.get_by_reset_token(token)
        if user is None:
            return False

        self._users.update(user.id, {
            "password": await self._hasher.hash(new_password),
            "reset_password_token": None,
        })
        logger.info(f"Password reset completed for user {user.id}")
        return True

    async def verify_email(self, token: str) -> bool:
        user = self._users.get_by_verification_token(token)
        if user is None:
            return False

        self._users.update(user.id, {
            "email_verified": True,
            "email_verification_token": None,
        })
        return True

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _send_quietly(self, to: str, subject: str, text: str) -> None:
        """Send an email whose failure must not fail the caller."""
        try:
            await self._email.send_email(to, subject, text)
        except ExternalServiceError as e:
            logger.warning(f"Could not send '{subject}' to {to}: {e.message}")
            capture_exception(e)
