"""
Authentication module data models.

These models define the account records stored in the `users` table and
the request/response shapes exposed by the auth routes.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from shared.models import AuthenticatedUser, Role


class User(BaseModel):
    """
    Full account record as stored in the database.

    Holds secrets (password hash and one-shot tokens); never return it
    from a route. Use to_public() instead.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address, unique")
    name: str = Field(..., description="Display name")
    password: str = Field(..., description="bcrypt password hash")
    role: Role = Field(default=Role.USER)
    email_verified: bool = Field(default=False)
    email_verification_token: Optional[str] = None
    reset_password_token: Optional[str] = None
    email_notification_enabled: bool = Field(default=False)
    created_at: Optional[datetime] = None

    def to_public(self) -> "UserPublic":
        return UserPublic(id=self.id, email=self.email, name=self.name, role=self.role)


class UserPublic(BaseModel):
    """Projection of a user that is safe to return to clients."""

    id: str
    email: str
    name: str
    role: Role


class RegisterRequest(BaseModel):
    """Request to create an account."""

    email: EmailStr
    name: str = Field(..., min_length=2, max_length=100)
    password: str = Field(..., min_length=8, max_length=255)


class LoginRequest(BaseModel):
    """Request to exchange credentials for a token."""

    email: EmailStr
    password: str


class UpdateUserRequest(BaseModel):
    """Partial update of an account; omitted fields are left untouched."""

    email: Optional[EmailStr] = None
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    password: Optional[str] = Field(None, min_length=8, max_length=255)


class ResetPasswordRequest(BaseModel):
    """Request a password reset link."""

    email: EmailStr


class ConfirmPasswordResetRequest(BaseModel):
    """Consume a reset token and set a new password."""

    token: str = Field(..., min_length=1)
    password: str = Field(..., min_length=8, max_length=255)


class LoginResult(BaseModel):
    """
    Outcome of an authentication attempt.

    A soft-fail result has token=None and a message explaining why.
    """

    token: Optional[str] = None
    user: Optional[UserPublic] = None
    message: Optional[str] = None


class LoginResponse(BaseModel):
    """Successful login response."""

    token: str
    user: UserPublic


class MessageResponse(BaseModel):
    """Generic acknowledgement."""

    message: str


__all__ = [
    "AuthenticatedUser",
    "Role",
    "User",
    "UserPublic",
    "RegisterRequest",
    "LoginRequest",
    "UpdateUserRequest",
    "ResetPasswordRequest",
    "ConfirmPasswordResetRequest",
    "LoginResult",
    "LoginResponse",
    "MessageResponse",
]
