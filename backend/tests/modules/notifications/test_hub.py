"""Tests for the realtime notification hub."""

import pytest
from unittest.mock import AsyncMock

from modules.notifications.hub import IRealtimeChannel, NotificationHub


def make_socket(fails: bool = False) -> AsyncMock:
    socket = AsyncMock()
    if fails:
        socket.send_json.side_effect = RuntimeError("connection closed")
    return socket


class TestNotificationHub:
    def test_implements_channel(self):
        assert isinstance(NotificationHub(), IRealtimeChannel)

    def test_connect_and_disconnect(self):
        hub = NotificationHub()
        first, second = make_socket(), make_socket()

        hub.connect("u", first)
        hub.connect("u", second)
        assert hub.connection_count("u") == 2

        hub.disconnect("u", first)
        hub.disconnect("u", second)
        assert hub.connection_count("u") == 0
        assert hub.connection_count() == 0

    def test_disconnect_unknown_is_noop(self):
        NotificationHub().disconnect("nobody", make_socket())

    @pytest.mark.asyncio
    async def test_send_to_user_reaches_only_that_user(self):
        hub = NotificationHub()
        mine, theirs = make_socket(), make_socket()
        hub.connect("u", mine)
        hub.connect("v", theirs)

        delivered = await hub.send_to_user("u", {"event": "notification", "message": "hi"})

        assert delivered == 1
        mine.send_json.assert_awaited_once_with({"event": "notification", "message": "hi"})
        theirs.send_json.assert_not_called()

    @pytest.mark.asyncio
    async def test_send_to_offline_user(self):
        assert await NotificationHub().send_to_user("u", {"message": "hi"}) == 0

    @pytest.mark.asyncio
    async def test_broadcast_reaches_everyone(self):
        hub = NotificationHub()
        sockets = [make_socket(), make_socket(), make_socket()]
        hub.connect("u", sockets[0])
        hub.connect("u", sockets[1])
        hub.connect("v", sockets[2])

        assert await hub.broadcast({"message": "all"}) == 3

    @pytest.mark.asyncio
    async def test_dead_socket_is_dropped(self):
        hub = NotificationHub()
        dead, alive = make_socket(fails=True), make_socket()
        hub.connect("u", dead)
        hub.connect("v", alive)

        delivered = await hub.broadcast({"message": "all"})

        assert delivered == 1
        assert hub.connection_count("u") == 0
        assert hub.connection_count("v") == 1
