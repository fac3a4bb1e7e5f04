"""
Notification API endpoints.

REST endpoints for a user's notifications, an admin dispatch endpoint,
and the WebSocket that delivers realtime pushes.
"""

import logging
from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect, status

from api.middleware.auth import get_current_user, require_roles
from api.dependencies import get_notification_hub, get_notification_service, get_token_codec
from modules.auth.tokens import TokenCodec
from shared.config import Settings, get_settings
from shared.exceptions import AuthenticationError, ValidationError
from shared.models import AuthenticatedUser, Role

from .hub import NotificationHub
from .interfaces import INotificationService
from .models import (
    EmailPreferenceRequest,
    Notification,
    NotificationListResponse,
    SendNotificationRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    page_size: int = Query(default=20, ge=1, description="Items per page"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: INotificationService = Depends(get_notification_service),
    settings: Settings = Depends(get_settings),
) -> NotificationListResponse:
    """List the current user's notifications, most recent first."""
    limit = settings.notification_max_page_size
    if page_size > limit:
        raise ValidationError(
            "Validation error",
            errors=[{
                "field": "page_size",
                "message": f"Input should be less than or equal to {limit}",
            }],
        )
    notifications = await service.list_for_user(user.id, page, page_size)
    return NotificationListResponse(notifications=notifications, page=page, page_size=page_size)


@router.post("", response_model=Notification, status_code=201)
async def send_notification(
    request: SendNotificationRequest,
    user: AuthenticatedUser = Depends(require_roles(Role.ADMIN)),
    service: INotificationService = Depends(get_notification_service),
) -> Notification:
    """
    Dispatch a notification.

    Targets one user when user_id is set, otherwise broadcasts to everyone.
    """
    if request.user_id:
        return await service.notify_user(request.user_id, request.message, request.also_email)
    return await service.notify_all(request.message, request.also_email)


@router.put("/preferences", status_code=204)
async def update_email_preference(
    request: EmailPreferenceRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: INotificationService = Depends(get_notification_service),
) -> None:
    """Turn email copies of notifications on or off for the current user."""
    await service.set_email_preference(user.id, request.enabled)


@router.patch("/{notification_id}/read", response_model=Notification)
async def mark_notification_read(
    notification_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: INotificationService = Depends(get_notification_service),
) -> Notification:
    """Mark a notification as read."""
    return await service.mark_read(notification_id)


@router.delete("/{notification_id}", status_code=204)
async def delete_notification(
    notification_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: INotificationService = Depends(get_notification_service),
) -> None:
    """Delete a notification."""
    await service.delete(notification_id)


@router.websocket("/ws")
async def notification_socket(
    websocket: WebSocket,
    token: str = Query(default=""),
    codec: TokenCodec = Depends(get_token_codec),
    hub: NotificationHub = Depends(get_notification_hub),
):
    """
    Realtime channel.

    Connect with ?token=<bearer token>. The server pushes
    {"event": "notification", "message": "..."} frames; client frames
    are ignored.
    """
    try:
        user = codec.verify(token)
    except AuthenticationError as e:
        logger.info(f"Rejected realtime connection: {e.message}")
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()
    hub.connect(user.id, websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        hub.disconnect(user.id, websocket)
