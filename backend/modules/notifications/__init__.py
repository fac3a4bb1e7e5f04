"""
Notifications module.

Stores notifications, pushes them to connected clients over a WebSocket
channel, and optionally echoes them by email.

Public API:
- INotificationService: Interface for dispatch and management
- NotificationHub / IRealtimeChannel: Realtime channel
- Notification: Stored notification
"""

from .interfaces import INotificationService
from .hub import IRealtimeChannel, NotificationHub
from .models import (
    Notification,
    NotificationListResponse,
    SendNotificationRequest,
    EmailPreferenceRequest,
    RealtimeEvent,
)
from .exceptions import NotificationNotFoundError

__all__ = [
    "INotificationService",
    "IRealtimeChannel",
    "NotificationHub",
    "Notification",
    "NotificationListResponse",
    "SendNotificationRequest",
    "EmailPreferenceRequest",
    "RealtimeEvent",
    "NotificationNotFoundError",
]
