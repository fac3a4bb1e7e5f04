"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the `users` table.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import User


class UserRepository(BaseRepository[User]):
    """
    Repository for account data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for ownership and role rules.
    """

    table_name = "users"

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_by_id(self, user_id: str) -> Optional[User]:
        row = self._first(self._table().select("*").eq("id", user_id).limit(1).execute())
        return self._map_to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        row = self._first(self._table().select("*").eq("email", email).limit(1).execute())
        return self._map_to_user(row) if row else None

    def get_by_verification_token(self, token: str) -> Optional[User]:
        result = (
            self._table()
            .select("*")
            .eq("email_verification_token", token)
            .limit(1)
            .execute()
        )
        row = self._first(result)
        return self._map_to_user(row) if row else None

    def get_by_reset_token(self, token: str) -> Optional[User]:
        result = (
            self._table()
            .select("*")
            .eq("reset_password_token", token)
            .limit(1)
            .execute()
        )
        row = self._first(result)
        return self._map_to_user(row) if row else None

    def list_all(self) -> list[User]:
        result = self._table().select("*").order("created_at").execute()
        return [self._map_to_user(row) for row in result.data]

    def list_email_subscribers(self) -> list[User]:
        """Users who opted in to email notifications."""
        result = self._table().select("*").eq("email_notification_enabled", True).execute()
        return [self._map_to_user(row) for row in result.data]

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create(self, data: dict[str, Any]) -> User:
        """
        Insert a new user.

        Args:
            data: Column values; id and created_at are generated by the database.

        Returns:
            The created user.
        """
        result = self._table().insert(data).execute()
        return self._map_to_user(result.data[0])

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[User]:
        """
        Update columns on a user.

        Returns:
            The updated user, or None if no row matched.
        """
        row = self._first(self._table().update(data).eq("id", user_id).execute())
        return self._map_to_user(row) if row else None

    def delete(self, user_id: str) -> Optional[User]:
        """
        Delete a user.

        Returns:
            The deleted user, or None if no row matched.
        """
        row = self._first(self._table().delete().eq("id", user_id).execute())
        return self._map_to_user(row) if row else None

    # -------------------------------------------------------------------------
    # Mapping
    # -------------------------------------------------------------------------

    @staticmethod
    def _map_to_user(data: dict[str, Any]) -> User:
        return User(
            id=str(data["id"]),
            email=data["email"],
            name=data["name"],
            password=data["password"],
            role=data.get("role") or "USER",
            email_verified=bool(data.get("email_verified", False)),
            email_verification_token=data.get("email_verification_token"),
            reset_password_token=data.get("reset_password_token"),
            email_notification_enabled=bool(data.get("email_notification_enabled", False)),
            created_at=data.get("created_at"),
        )
