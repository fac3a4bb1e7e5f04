"""
Realtime notification channel.

Keeps the open WebSocket connections of this process, grouped by user
id, and pushes JSON events to one user or to everyone. A single hub is
created per process by the service container.
"""

import logging
from collections import defaultdict
from typing import Any, Protocol, runtime_checkable

from fastapi import WebSocket

logger = logging.getLogger(__name__)


@runtime_checkable
class IRealtimeChannel(Protocol):
    """Interface for pushing events to connected clients."""

    async def send_to_user(self, user_id: str, payload: dict[str, Any]) -> int:
        """Push to every connection of one user. Returns the delivery count."""
        ...

    async def broadcast(self, payload: dict[str, Any]) -> int:
        """Push to every connection. Returns the delivery count."""
        ...


class NotificationHub(IRealtimeChannel):
    """In-process WebSocket registry."""

    def __init__(self) -> None:
        self._connections: dict[str, set[WebSocket]] = defaultdict(set)

    def connect(self, user_id: str, websocket: WebSocket) -> None:
        """Register an accepted connection."""
        self._connections[user_id].add(websocket)
        logger.debug(f"Realtime connection opened for user {user_id}")

    def disconnect(self, user_id: str, websocket: WebSocket) -> None:
        sockets = self._connections.get(user_id)
        if not sockets:
            return
        sockets.discard(websocket)
        if not sockets:
            del self._connections[user_id]
        logger.debug(f"Realtime connection closed for user {user_id}")

    def connection_count(self, user_id: str | None = None) -> int:
        if user_id is not None:
            return len(self._connections.get(user_id, ()))
        return sum(len(sockets) for sockets in self._connections.values())

    async def send_to_user(self, user_id: str, payload: dict[str, Any]) -> int:
        delivered = 0
        for websocket in list(self._connections.get(user_id, ())):
            if await self._send(user_id, websocket, payload):
                delivered += 1
        return delivered

    async def broadcast(self, payload: dict[str, Any]) -> int:
        delivered = 0
        for user_id, sockets in list(self._connections.items()):
            for websocket in list(sockets):
                if await self._send(user_id, websocket, payload):
                    delivered += 1
        return delivered

    async def _send(self, user_id: str, websocket: WebSocket, payload: dict[str, Any]) -> bool:
        try:
            await websocket.send_json(payload)
            return True
        except Exception as e:
            # A dead socket only loses its own copy; drop it and keep going.
            logger.info(f"Dropping realtime connection for user {user_id}: {e}")
            self.disconnect(user_id, websocket)
            return False
