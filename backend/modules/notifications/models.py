"""
Notifications module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class Notification(BaseModel):
    """A stored notification. user_id is None for broadcasts."""

    id: str = Field(..., description="Notification ID (UUID)")
    user_id: Optional[str] = Field(None, description="Target user, None for broadcast")
    message: str
    read: bool = False
    created_at: Optional[datetime] = None


class NotificationListResponse(BaseModel):
    """One page of a user's notifications, newest first."""

    notifications: list[Notification]
    page: int
    page_size: int


class SendNotificationRequest(BaseModel):
    """Admin request to notify one user, or everyone when user_id is omitted."""

    message: str = Field(..., min_length=1, max_length=2000)
    user_id: Optional[str] = None
    also_email: bool = False


class EmailPreferenceRequest(BaseModel):
    """Turn email echoes of notifications on or off."""

    enabled: bool


class RealtimeEvent(BaseModel):
    """Payload pushed over the realtime channel."""

    event: str = "notification"
    message: str
