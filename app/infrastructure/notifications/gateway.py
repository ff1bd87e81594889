"""Websocket gateway that authenticates clients and pushes payloads to them."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from fastapi import WebSocket, WebSocketDisconnect

from app.infrastructure.security import (
    TokenIdentity,
    decode_access_token,
    extract_bearer_token,
)
from app.utils import utc_now

from .registry import Connection, ConnectionRegistry, close_quietly, is_writable

logger = logging.getLogger(__name__)

CLOSE_UNAUTHENTICATED = 4001
CLOSE_GOING_AWAY = 1001

CONNECTED_MESSAGE = "Connected to real-time notifications"
UNKNOWN_FRAME_MESSAGE = "Unrecognized message type"
INVALID_FRAME_MESSAGE = "Invalid message"


def _timestamp() -> str:
    return utc_now().isoformat()


class RealtimeGateway:
    """Accept notification websockets and deliver payloads to connected users.

    One instance is created per application. Route handlers reach it through
    ``app.state`` and the notification publisher receives it as its notifier.
    """

    def __init__(
        self,
        registry: ConnectionRegistry | None = None,
        *,
        token_decoder: Callable[[str], TokenIdentity] = decode_access_token,
    ) -> None:
        self.registry = registry or ConnectionRegistry()
        self._decode_token = token_decoder

    def authenticate(self, websocket: WebSocket) -> TokenIdentity | None:
        """Return the identity carried by the handshake credential, if valid."""

        token = websocket.query_params.get("token") or extract_bearer_token(
            websocket.headers.get("authorization")
        )
        if not token:
            logger.info("Realtime connection rejected: no token provided")
            return None
        try:
            return self._decode_token(token)
        except ValueError as exc:
            logger.info("Realtime connection rejected: %s", exc)
            return None

    async def serve(self, websocket: WebSocket) -> None:
        """Run the full lifecycle of one websocket connection."""

        await websocket.accept()
        identity = self.authenticate(websocket)
        if identity is None:
            await websocket.close(code=CLOSE_UNAUTHENTICATED, reason="Authentication required")
            return

        user_id = identity.user_id
        await self.registry.register(user_id, websocket)
        logger.info(
            "Realtime connection opened for %s (%s); %s client(s) connected",
            identity.email,
            user_id,
            len(self.registry),
        )
        try:
            await websocket.send_json(
                {"type": "connected", "message": CONNECTED_MESSAGE, "timestamp": _timestamp()}
            )
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    raise WebSocketDisconnect(message.get("code", 1000), message.get("reason"))
                raw = message.get("text")
                if raw is None:
                    raw = message.get("bytes") or b""
                await websocket.send_json(self.handle_client_frame(identity, raw))
        except WebSocketDisconnect:
            logger.debug("Realtime client %s disconnected", user_id)
        except RuntimeError:
            # Raised by Starlette once the socket was closed from our side,
            # e.g. when a newer connection replaced this one.
            logger.debug("Realtime connection for user %s closed by the server", user_id)
        finally:
            self.registry.unregister(user_id, websocket)
            logger.info(
                "Realtime connection closed for user %s; %s client(s) connected",
                user_id,
                len(self.registry),
            )

    def handle_client_frame(self, identity: TokenIdentity, raw: str | bytes) -> dict[str, Any]:
        """Return the reply for one client frame; malformed frames get an error reply.

        Binary frames are decoded as UTF-8 JSON, like text ones.
        """

        try:
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8")
            message = json.loads(raw)
        except ValueError:
            logger.debug("Invalid realtime frame from user %s", identity.user_id)
            return {"type": "error", "message": INVALID_FRAME_MESSAGE}
        if not isinstance(message, dict):
            return {"type": "error", "message": INVALID_FRAME_MESSAGE}

        frame_type = message.get("type")
        if frame_type == "ping":
            return {"type": "pong", "timestamp": _timestamp()}
        if frame_type == "subscribe":
            # Topics are acknowledged only; every notification is still delivered.
            topics = message.get("topics")
            if not isinstance(topics, list) or not topics:
                topics = ["all"]
            logger.debug("User %s subscribed to %s", identity.user_id, topics)
            return {"type": "subscribed", "topics": topics}
        return {"type": "error", "message": UNKNOWN_FRAME_MESSAGE}

    async def deliver(self, user_id: int, payload: dict[str, Any]) -> bool:
        """Push ``payload`` to ``user_id``; ``False`` when the user is offline."""

        connection = self.registry.lookup(user_id)
        if connection is None:
            logger.debug("User %s not connected; notification kept for polling", user_id)
            return False
        message = {"type": "notification", "data": payload, "timestamp": _timestamp()}
        if not await self._send(user_id, connection, message):
            return False
        logger.debug("Notification pushed to user %s", user_id)
        return True

    async def broadcast(self, payload: dict[str, Any]) -> int:
        """Send ``payload`` to every live connection and return the number reached."""

        sent = 0
        for user_id, connection in self.registry.items():
            if await self._send(user_id, connection, payload):
                sent += 1
        logger.info("Broadcast delivered to %s client(s)", sent)
        return sent

    async def close(self) -> None:
        """Close every connection and empty the registry."""

        entries = self.registry.items()
        self.registry.clear()
        for _user_id, connection in entries:
            await close_quietly(connection, CLOSE_GOING_AWAY, "Server shutting down")
        if entries:
            logger.info("Closed %s realtime connection(s)", len(entries))

    def stats(self) -> dict[str, Any]:
        user_ids = self.registry.user_ids()
        return {"connected_clients": len(user_ids), "user_ids": user_ids}

    async def _send(self, user_id: int, connection: Connection, message: dict[str, Any]) -> bool:
        if not is_writable(connection):
            self.registry.unregister(user_id, connection)
            return False
        try:
            await connection.send_json(message)
        except (RuntimeError, WebSocketDisconnect, OSError):
            logger.warning("Dropping unreachable realtime connection for user %s", user_id)
            self.registry.unregister(user_id, connection)
            return False
        return True


__all__ = [
    "CLOSE_GOING_AWAY",
    "CLOSE_UNAUTHENTICATED",
    "RealtimeGateway",
]
