"""
Tests for JWT authentication middleware.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from api.dependencies import get_account_service, get_token_codec
from api.middleware.auth import decode_token, get_current_user, require_roles
from modules.auth.exceptions import ExpiredTokenError, ForbiddenError, InvalidTokenError, MissingTokenError
from shared.exceptions import InternalError
from shared.models import AuthenticatedUser, Role

from tests.conftest import create_test_token


@pytest.fixture
def client(app) -> TestClient:
    service = AsyncMock()
    service.get_all.return_value = []
    app.dependency_overrides[get_account_service] = lambda: service
    return TestClient(app)


class TestDecodeToken:
    def test_valid_token(self, codec):
        """Valid token should decode successfully."""
        user = decode_token(create_test_token(), codec)
        assert user.id == "test-user-123"
        assert user.email == "test@example.com"

    def test_expired_token(self, codec):
        with pytest.raises(ExpiredTokenError):
            decode_token(create_test_token(expired=True), codec)

    def test_invalid_token(self, codec):
        with pytest.raises(InvalidTokenError) as exc_info:
            decode_token("invalid-token", codec)
        assert "Invalid token" in exc_info.value.message

    def test_unexpected_failure_is_internal(self):
        codec = MagicMock()
        codec.verify.side_effect = RuntimeError("boom")
        with pytest.raises(InternalError):
            decode_token("whatever", codec)


class TestGetCurrentUser:
    @pytest.mark.asyncio
    async def test_missing_credentials(self, codec):
        with pytest.raises(MissingTokenError):
            await get_current_user(None, codec)


class TestRequireRoles:
    @pytest.mark.asyncio
    async def test_role_not_in_whitelist(self):
        dependency = require_roles(Role.ADMIN)
        user = AuthenticatedUser(id="u", email="u@example.com", role=Role.USER)
        with pytest.raises(ForbiddenError):
            await dependency(user)

    @pytest.mark.asyncio
    async def test_role_in_whitelist(self):
        dependency = require_roles(Role.USER, Role.ADMIN)
        user = AuthenticatedUser(id="u", email="u@example.com", role=Role.USER)
        assert await dependency(user) is user


class TestAuthenticationGate:
    def test_missing_auth_header(self, client):
        """Request without auth header should return 401."""
        response = client.get("/users")
        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}
        assert response.headers["www-authenticate"] == "Bearer"

    def test_expired_token(self, client):
        token = create_test_token(role=Role.ADMIN, expired=True)
        response = client.get("/users", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json() == {"error": "Token has expired"}

    def test_invalid_token(self, client):
        response = client.get("/users", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401
        assert response.json()["error"].startswith("Invalid token")

    def test_token_signed_with_other_secret(self, client):
        token = create_test_token(role=Role.ADMIN, secret="some-other-secret")
        response = client.get("/users", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_wrong_role(self, client, auth_headers):
        response = client.get("/users", headers=auth_headers)
        assert response.status_code == 403
        assert response.json() == {"error": "Forbidden"}

    def test_right_role(self, client, admin_headers):
        response = client.get("/users", headers=admin_headers)
        assert response.status_code == 200

    def test_verification_crash_is_500(self, app, client, admin_headers):
        broken = MagicMock()
        broken.verify.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_token_codec] = lambda: broken

        response = client.get("/users", headers=admin_headers)

        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}
