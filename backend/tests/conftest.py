"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import uuid
from datetime import datetime, timezone, timedelta
from typing import Any, Optional
from unittest.mock import AsyncMock

import pytest

from api.app import create_app
from api.dependencies import reset_container
from modules.auth.models import User
from modules.auth.passwords import PasswordHasher
from modules.auth.tokens import TokenCodec
from shared.config import get_settings
from shared.database import reset_client_cache
from shared.models import Role


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    role: Role = Role.USER,
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        role: Role claim
        expired: If True, creates an already expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    if expired:
        now -= timedelta(hours=2)
    codec = TokenCodec(secret, expires_in=timedelta(hours=1))
    return codec.issue({"id": user_id, "email": email, "role": role}, now=now)


def make_user(**overrides: Any) -> User:
    """Build a stored user record with sensible defaults."""
    data = {
        "id": "test-user-123",
        "email": "test@example.com",
        "name": "Test User",
        "password": "$2b$04$notarealhashnotarealhashnotarealhashnotarealhash",
        "role": Role.USER,
        "email_verified": True,
    }
    data.update(overrides)
    return User(**data)


class InMemoryUserRepository:
    """Dict-backed stand-in for UserRepository."""

    def __init__(self, users: Optional[list[User]] = None):
        self.users: dict[str, User] = {user.id: user for user in users or []}

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    def get_by_verification_token(self, token: str) -> Optional[User]:
        return next(
            (u for u in self.users.values() if u.email_verification_token == token), None
        )

    def get_by_reset_token(self, token: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.reset_password_token == token), None)

    def list_all(self) -> list[User]:
        return list(self.users.values())

    def list_email_subscribers(self) -> list[User]:
        return [u for u in self.users.values() if u.email_notification_enabled]

    def create(self, data: dict[str, Any]) -> User:
        user = User(id=str(uuid.uuid4()), **data)
        self.users[user.id] = user
        return user

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[User]:
        user = self.users.get(user_id)
        if user is None:
            return None
        self.users[user_id] = user.model_copy(update=data)
        return self.users[user_id]

    def delete(self, user_id: str) -> Optional[User]:
        return self.users.pop(user_id, None)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Give every test fresh settings, a fresh container and no cached client."""
    monkeypatch.setenv("JWT_SECRET", TEST_JWT_SECRET)
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path / "uploads"))
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()
    yield
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()


@pytest.fixture
def app():
    """Create a fresh app for each test."""
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def codec() -> TokenCodec:
    return TokenCodec(TEST_JWT_SECRET)


@pytest.fixture
def hasher() -> PasswordHasher:
    """A fast hasher; 4 is bcrypt's minimum cost."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def email_sender() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Authorization headers for an administrator."""
    token = create_test_token(user_id="admin-1", email="admin@example.com", role=Role.ADMIN)
    return {"Authorization": f"Bearer {token}"}
