"""
Notification dispatcher implementation.

Each dispatch runs three steps in order: store the row, push it over
the realtime channel, optionally echo it by email. Only the first step
can fail the call.
"""

import logging

from modules.auth.exceptions import UserNotFoundError
from modules.auth.repository import UserRepository
from shared.email import IEmailSender
from shared.error_tracking import capture_exception

from .exceptions import NotificationNotFoundError
from .hub import IRealtimeChannel
from .interfaces import INotificationService
from .models import Notification, RealtimeEvent
from .repository import NotificationRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_PAGE_SIZE = 100


class NotificationService(INotificationService):
    """Notification service with Supabase storage and a realtime hub."""

    def __init__(
        self,
        repository: NotificationRepository,
        users: UserRepository,
        channel: IRealtimeChannel,
        email: IEmailSender,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
    ):
        self._notifications = repository
        self._users = users
        self._channel = channel
        self._email = email
        self._max_page_size = max_page_size

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    async def notify_user(
        self,
        user_id: str,
        message: str,
        also_email: bool = False,
    ) -> Notification:
        notification = self._notifications.create(user_id, message)

        payload = RealtimeEvent(message=message).model_dump()
        try:
            await self._channel.send_to_user(user_id, payload)
        except Exception as e:
            logger.warning(f"Realtime push to user {user_id} failed: {e}")
            capture_exception(e)

        if also_email:
            try:
                user = self._users.get_by_id(user_id)
            except Exception as e:
                logger.warning(f"Recipient lookup for user {user_id} failed: {e}")
                capture_exception(e)
                user = None
            if user and user.email:
                await self._echo_email(user.email, "New Notification", message)

        return notification

    async def notify_all(self, message: str, also_email: bool = False) -> Notification:
        notification = self._notifications.create(None, message)

        payload = RealtimeEvent(message=message).model_dump()
        try:
            await self._channel.broadcast(payload)
        except Exception as e:
            logger.warning(f"Realtime broadcast failed: {e}")
            capture_exception(e)

        if also_email:
            try:
                subscribers = self._users.list_email_subscribers()
            except Exception as e:
                logger.warning(f"Email subscriber lookup failed: {e}")
                capture_exception(e)
                subscribers = []
            for user in subscribers:
                await self._echo_email(user.email, "New Broadcast Notification", message)
            logger.info(f"Broadcast emailed to {len(subscribers)} subscribers")

        return notification

    # -------------------------------------------------------------------------
    # Management
    # -------------------------------------------------------------------------

    async def list_for_user(
        self,
        user_id: str,
        page: int = 1,
        page_size: int = 20,
    ) -> list[Notification]:
        page = max(page, 1)
        page_size = min(max(page_size, 1), self._max_page_size)
        return self._notifications.list_for_user(user_id, page, page_size)

    # TODO: mark_read and delete accept any caller; add an owner check once
    # the product decides whether admins alone may touch others' notifications.
    async def mark_read(self, notification_id: str) -> Notification:
        notification = self._notifications.mark_read(notification_id)
        if notification is None:
            raise NotificationNotFoundError(notification_id)
        return notification

    async def delete(self, notification_id: str) -> Notification:
        notification = self._notifications.delete(notification_id)
        if notification is None:
            raise NotificationNotFoundError(notification_id)
        return notification

    async def set_email_preference(self, user_id: str, enabled: bool) -> None:
        if self._users.update(user_id, {"email_notification_enabled": enabled}) is None:
            raise UserNotFoundError(user_id)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _echo_email(self, to: str, subject: str, message: str) -> None:
        try:
            await self._email.send_email(to, subject, message)
        except Exception as e:
            logger.warning(f"Email echo to {to} failed: {e}")
            capture_exception(e)
