"""
Notifications module interface.
"""

from typing import Protocol, runtime_checkable

from .models import Notification


@runtime_checkable
class INotificationService(Protocol):
    """
    Interface for notification dispatch and management.

    Dispatch is fire-and-forget past the database write: a failed
    realtime push or email echo is logged, never raised, and never
    undoes the stored notification.
    """

    async def notify_user(
        self,
        user_id: str,
        message: str,
        also_email: bool = False,
    ) -> Notification:
        """Store, push and optionally email a notification for one user."""
        ...

    async def notify_all(self, message: str, also_email: bool = False) -> Notification:
        """Store and broadcast a notification; optionally email opted-in users."""
        ...

    async def list_for_user(
        self,
        user_id: str,
        page: int = 1,
        page_size: int = 20,
    ) -> list[Notification]:
        """List a user's notifications, newest first."""
        ...

    async def mark_read(self, notification_id: str) -> Notification:
        """
        Mark a notification as read.

        Raises:
            NotificationNotFoundError: If it doesn't exist
        """
        ...

    async def delete(self, notification_id: str) -> Notification:
        """
        Delete a notification.

        Raises:
            NotificationNotFoundError: If it doesn't exist
        """
        ...

    async def set_email_preference(self, user_id: str, enabled: bool) -> None:
        """Turn email echoes on or off for a user."""
        ...
