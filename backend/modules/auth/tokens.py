"""
JWT token codec.

Signs and verifies the session claim {id, email, role} with a
server-held HS256 secret and a fixed expiry.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional
import jwt

from shared.exceptions import ConfigurationError
from shared.models import AuthenticatedUser

from .exceptions import InvalidTokenError, ExpiredTokenError

ALGORITHM = "HS256"
DEFAULT_EXPIRES_IN = timedelta(hours=1)


class TokenCodec:
    """
    Issues and verifies signed session tokens.

    There is no refresh or revocation: a token is valid until its
    expiry, after which the caller must log in again.
    """

    def __init__(
        self,
        secret: str,
        expires_in: timedelta = DEFAULT_EXPIRES_IN,
        algorithm: str = ALGORITHM,
    ):
        if not secret:
            raise ConfigurationError(
                "JWT_SECRET environment variable is not set",
                code="JWT_SECRET_MISSING",
            )
        self._secret = secret
        self._expires_in = expires_in
        self._algorithm = algorithm

    @property
    def expires_in(self) -> timedelta:
        return self._expires_in

    def issue(self, claim: dict[str, Any], now: Optional[datetime] = None) -> str:
        """
        Sign a claim.

        Args:
            claim: Mapping with id, email and role
            now: Issue time (defaults to the current UTC time)

        Returns:
            Encoded JWT string
        """
        issued_at = now or datetime.now(timezone.utc)
        role = claim["role"]
        payload = {
            "id": str(claim["id"]),
            "email": claim["email"],
            "role": getattr(role, "value", role),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._expires_in).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> AuthenticatedUser:
        """
        Verify a token and return the decoded claim.

        Raises:
            ExpiredTokenError: If the token's expiry has passed
            InvalidTokenError: If the token is malformed or badly signed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

        try:
            return AuthenticatedUser(
                id=payload["id"],
                email=payload["email"],
                role=payload["role"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Invalid token: malformed claim ({e})")
