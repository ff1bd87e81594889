"""In-memory index of the live websocket connection held by each user."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from starlette.websockets import WebSocketState

logger = logging.getLogger(__name__)

CLOSE_REPLACED = 4002


class Connection(Protocol):
    """Subset of :class:`fastapi.WebSocket` the registry relies on."""

    client_state: WebSocketState
    application_state: WebSocketState

    async def send_json(self, data: Any, mode: str = "text") -> None: ...

    async def close(self, code: int = 1000, reason: str | None = None) -> None: ...


def is_writable(connection: Connection) -> bool:
    """Return ``True`` while both sides of ``connection`` are still open."""

    return (
        connection.client_state == WebSocketState.CONNECTED
        and connection.application_state == WebSocketState.CONNECTED
    )


async def close_quietly(connection: Connection, code: int, reason: str | None = None) -> None:
    """Close ``connection`` unless it already went away."""

    if connection.application_state == WebSocketState.DISCONNECTED:
        return
    try:
        await connection.close(code=code, reason=reason)
    except (RuntimeError, OSError):
        logger.debug("Connection already closed while sending close code %s", code)


class ConnectionRegistry:
    """Map each user id to at most one live connection.

    The registry is only touched from the event loop serving the websockets,
    so it needs no locking.
    """

    def __init__(self) -> None:
        self._connections: dict[int, Connection] = {}

    async def register(self, user_id: int, connection: Connection) -> None:
        """Store ``connection`` for ``user_id``, closing whatever it replaces."""

        previous = self._connections.get(user_id)
        self._connections[user_id] = connection
        if previous is not None and previous is not connection:
            logger.info("Replacing realtime connection for user %s", user_id)
            await close_quietly(previous, CLOSE_REPLACED, "Replaced by a newer connection")

    def unregister(self, user_id: int, connection: Connection | None = None) -> None:
        """Forget the entry for ``user_id`` without closing it.

        When ``connection`` is given the entry is only removed if it still
        points at that connection, so a handler that was replaced cannot evict
        its successor.
        """

        current = self._connections.get(user_id)
        if current is None:
            return
        if connection is not None and current is not connection:
            return
        del self._connections[user_id]

    def lookup(self, user_id: int) -> Connection | None:
        return self._connections.get(user_id)

    def items(self) -> list[tuple[int, Connection]]:
        return list(self._connections.items())

    def user_ids(self) -> list[int]:
        return list(self._connections)

    def clear(self) -> None:
        self._connections.clear()

    def __len__(self) -> int:
        return len(self._connections)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._connections


__all__ = [
    "CLOSE_REPLACED",
    "Connection",
    "ConnectionRegistry",
    "close_quietly",
    "is_writable",
]
