"""
JWT authentication and authorization dependencies.

Validates bearer tokens issued by TokenCodec and enforces role
whitelists and resource policies on protected routes.
"""

import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import ForbiddenError, MissingTokenError
from modules.auth.policies import Policy, ensure_allowed
from modules.auth.tokens import TokenCodec
from shared.exceptions import AuthenticationError, InternalError
from shared.models import AuthenticatedUser, Role

from ..dependencies import get_token_codec

logger = logging.getLogger(__name__)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def decode_token(token: str, codec: TokenCodec) -> AuthenticatedUser:
    """
    Decode and validate a bearer token.

    Args:
        token: The JWT token string
        codec: Codec holding the signing secret

    Returns:
        The decoded claim

    Raises:
        AuthenticationError: If token is invalid or expired
        InternalError: If decoding failed for any other reason
    """
    try:
        return codec.verify(token)
    except AuthenticationError:
        raise
    except Exception as e:
        logger.exception("Unexpected failure while verifying token")
        raise InternalError() from e


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    codec: TokenCodec = Depends(get_token_codec),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise MissingTokenError()

    return decode_token(credentials.credentials, codec)


def require_roles(*roles: Role):
    """
    Build a dependency that requires one of the given roles.

    Usage:
        @router.get("/admin-only")
        async def admin_route(user: AuthenticatedUser = Depends(require_roles(Role.ADMIN))):
            ...
    """
    allowed = frozenset(roles)

    async def dependency(
        user: AuthenticatedUser = Depends(get_current_user),
    ) -> AuthenticatedUser:
        if user.role not in allowed:
            logger.info(f"User {user.id} with role {user.role.value} denied")
            raise ForbiddenError()
        return user

    return dependency


def enforce_policy(policy: Policy, user: AuthenticatedUser, resource_id: str, action: str) -> None:
    """
    Check a resource policy for the current user.

    Raises:
        AccountAccessDeniedError: If the policy denies access
    """
    ensure_allowed(policy, user, resource_id, action)

