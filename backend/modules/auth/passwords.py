"""
Password hashing with bcrypt.

Hashing and comparison are deliberately slow, so both run in a worker
thread to keep the event loop free.
"""

import asyncio
import bcrypt

DEFAULT_ROUNDS = 10


class PasswordHasher:
    """bcrypt hasher with a fixed cost factor."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self._rounds = rounds

    def _hash(self, password: str) -> str:
        return bcrypt.hashpw(
            password.encode("utf-8"),
            bcrypt.gensalt(rounds=self._rounds),
        ).decode("utf-8")

    @staticmethod
    def _check(password: str, password_hash: str) -> bool:
        return bcrypt.checkpw(
            password.encode("utf-8"),
            password_hash.encode("utf-8"),
        )

    async def hash(self, password: str) -> str:
        """Hash a plaintext password."""
        return await asyncio.to_thread(self._hash, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        """
        Compare a plaintext password with a stored hash.

        Raises:
            ValueError: If the stored hash is not a valid bcrypt hash
        """
        return await asyncio.to_thread(self._check, password, password_hash)
