"""End-to-end tests for the notification websocket."""

from __future__ import annotations

from datetime import timedelta

import pytest
from starlette.websockets import WebSocketDisconnect

from app.domain.entities import ProfileType
from app.infrastructure.notifications import CLOSE_REPLACED, CLOSE_UNAUTHENTICATED
from app.infrastructure.security import create_access_token, create_refresh_token

API = "/api/v1"
WS = "/ws/notifications"


def _connect_url(user) -> str:
    return f"{WS}?token={create_access_token(user)}"


def test_missing_token_is_rejected(client) -> None:
    with pytest.raises(WebSocketDisconnect) as exc_info:
        with client.websocket_connect(WS) as websocket:
            websocket.receive_json()

    assert exc_info.value.code == CLOSE_UNAUTHENTICATED


@pytest.mark.parametrize("token_kind", ["garbage", "expired", "refresh"])
def test_invalid_tokens_are_rejected(app, client, make_user, token_kind: str) -> None:
    user = make_user()
    token = {
        "garbage": "not-a-jwt",
        "expired": create_access_token(user, expires_delta=timedelta(seconds=-5)),
        "refresh": create_refresh_token(user),
    }[token_kind]

    with pytest.raises(WebSocketDisconnect) as exc_info:
        with client.websocket_connect(f"{WS}?token={token}") as websocket:
            websocket.receive_json()

    assert exc_info.value.code == CLOSE_UNAUTHENTICATED
    assert len(app.state.realtime_gateway.registry) == 0


def test_connected_client_can_ping_and_subscribe(client, make_user) -> None:
    user = make_user()

    with client.websocket_connect(_connect_url(user)) as websocket:
        greeting = websocket.receive_json()
        assert greeting["type"] == "connected"
        assert greeting["message"]
        assert greeting["timestamp"]

        websocket.send_json({"type": "ping"})
        assert websocket.receive_json()["type"] == "pong"

        websocket.send_json({"type": "subscribe", "topics": ["MESSAGE"]})
        assert websocket.receive_json() == {"type": "subscribed", "topics": ["MESSAGE"]}

        websocket.send_text("{broken")
        assert websocket.receive_json()["type"] == "error"

        websocket.send_json({"type": "unknown"})
        assert websocket.receive_json()["type"] == "error"

        websocket.send_bytes(b'{"type": "ping"}')
        assert websocket.receive_json()["type"] == "pong"

        websocket.send_bytes(b"\xff\xfe")
        assert websocket.receive_json()["type"] == "error"

        websocket.send_json({"type": "ping"})
        assert websocket.receive_json()["type"] == "pong"


def test_authorization_header_is_accepted(app, client, make_user, headers_for) -> None:
    user = make_user()

    with client.websocket_connect(WS, headers=headers_for(user)) as websocket:
        assert websocket.receive_json()["type"] == "connected"
        assert app.state.realtime_gateway.registry.lookup(user.id) is not None


def test_newer_connection_replaces_older_one(app, client, make_user) -> None:
    user = make_user()
    registry = app.state.realtime_gateway.registry

    with client.websocket_connect(_connect_url(user)) as first:
        assert first.receive_json()["type"] == "connected"
        with client.websocket_connect(_connect_url(user)) as second:
            assert second.receive_json()["type"] == "connected"

            with pytest.raises(WebSocketDisconnect) as exc_info:
                first.receive_json()
            assert exc_info.value.code == CLOSE_REPLACED

            second.send_json({"type": "ping"})
            assert second.receive_json()["type"] == "pong"
            assert len(registry) == 1


def test_notification_is_pushed_to_connected_user(client, make_user, headers_for) -> None:
    admin = make_user(profile_type=ProfileType.ADMIN)
    member = make_user()

    with client.websocket_connect(_connect_url(member)) as websocket:
        assert websocket.receive_json()["type"] == "connected"

        response = client.post(
            f"{API}/notifications",
            json={"user_id": member.id, "title": "Pitch day", "body": "Slots are open"},
            headers=headers_for(admin),
        )
        assert response.status_code == 201

        frame = websocket.receive_json()
        assert frame["type"] == "notification"
        assert frame["data"]["title"] == "Pitch day"
        assert frame["data"]["body"] == "Slots are open"
        assert frame["data"]["id"] == response.json()["data"]["id"]
        assert frame["timestamp"]

        # Only one frame was queued for the notification.
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json()["type"] == "pong"


def test_message_recipient_gets_live_notification(client, make_user, headers_for) -> None:
    sender = make_user("Ada Lovelace")
    recipient = make_user()

    with client.websocket_connect(_connect_url(recipient)) as websocket:
        websocket.receive_json()
        response = client.post(
            f"{API}/messages",
            json={"recipient_id": recipient.id, "subject": "Hi", "content": "Let's talk funding"},
            headers=headers_for(sender),
        )
        assert response.status_code == 201

        frame = websocket.receive_json()
        assert frame["data"]["category"] == "MESSAGE"
        assert frame["data"]["title"] == "New message from Ada Lovelace"


def test_admin_broadcast_reaches_connected_members(client, make_user, headers_for) -> None:
    admin = make_user(profile_type=ProfileType.ADMIN)
    members = [make_user(), make_user()]

    with client.websocket_connect(_connect_url(members[0])) as websocket:
        websocket.receive_json()

        stats = client.get(f"{API}/admin/realtime/stats", headers=headers_for(admin)).json()
        assert stats["data"] == {"enabled": True, "connected_clients": 1, "user_ids": [members[0].id]}

        response = client.post(
            f"{API}/admin/broadcast",
            json={"title": "Maintenance", "body": "Tonight at 22:00"},
            headers=headers_for(admin),
        )
        assert response.status_code == 200
        assert response.json()["data"] == {"delivered": 1, "stored": 3}

        frame = websocket.receive_json()
        assert frame["type"] == "broadcast"
        assert frame["data"]["title"] == "Maintenance"

    offline = client.get(f"{API}/notifications", headers=headers_for(members[1])).json()
    assert [item["category"] for item in offline["data"]] == ["SYSTEM"]
