"""
Notification repository for database access.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Notification


class NotificationRepository(BaseRepository[Notification]):
    """
    Repository for the `notifications` table.

    Note: This repository does NOT perform authorization checks.
    """

    table_name = "notifications"

    def create(self, user_id: Optional[str], message: str) -> Notification:
        result = self._table().insert({"user_id": user_id, "message": message}).execute()
        return self._map_to_notification(result.data[0])

    def list_for_user(self, user_id: str, page: int, page_size: int) -> list[Notification]:
        """
        List a user's notifications, newest first.

        Args:
            user_id: The target user's ID.
            page: Page number (1-indexed).
            page_size: Items per page.
        """
        offset = (page - 1) * page_size
        result = (
            self._table()
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .range(offset, offset + page_size - 1)
            .execute()
        )
        return [self._map_to_notification(row) for row in result.data]

    def mark_read(self, notification_id: str) -> Optional[Notification]:
        row = self._first(
            self._table().update({"read": True}).eq("id", notification_id).execute()
        )
        return self._map_to_notification(row) if row else None

    def delete(self, notification_id: str) -> Optional[Notification]:
        row = self._first(self._table().delete().eq("id", notification_id).execute())
        return self._map_to_notification(row) if row else None

    @staticmethod
    def _map_to_notification(data: dict[str, Any]) -> Notification:
        user_id = data.get("user_id")
        return Notification(
            id=str(data["id"]),
            user_id=str(user_id) if user_id is not None else None,
            message=data["message"],
            read=bool(data.get("read", False)),
            created_at=data.get("created_at"),
        )
