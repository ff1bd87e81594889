"""Tests for best-effort notification dispatch."""

from __future__ import annotations

import logging

import anyio
import pytest

from app.domain.entities import Notification, NotificationCategory
from app.infrastructure.notifications import NotificationPublisher, serialize_notification
from app.utils import utc_now


def _notification(**overrides) -> Notification:
    values = dict(
        id=11,
        user_id=3,
        category=NotificationCategory.MESSAGE,
        title="New message from Ada",
        body="Hello there",
        data={"message_id": 5},
        action_url="/messages",
        created_at=utc_now(),
    )
    values.update(overrides)
    return Notification(**values)


class RecordingNotifier:
    def __init__(
        self, *, called: anyio.Event | None = None, error: Exception | None = None
    ) -> None:
        self.calls: list[tuple[int, dict]] = []
        self.called = called
        self.error = error

    async def deliver(self, user_id: int, payload: dict) -> bool:
        self.calls.append((user_id, payload))
        if self.called is not None:
            self.called.set()
        if self.error is not None:
            raise self.error
        return True


def test_serialize_notification_is_json_safe() -> None:
    notification = _notification(data=None)

    payload = serialize_notification(notification)

    assert payload["id"] == 11
    assert payload["category"] == "MESSAGE"
    assert payload["title"] == "New message from Ada"
    assert payload["body"] == "Hello there"
    assert payload["data"] == {}
    assert payload["is_read"] is False
    assert isinstance(payload["created_at"], str)
    assert payload["read_at"] is None


@pytest.mark.anyio
async def test_dispatch_inside_event_loop_schedules_delivery() -> None:
    notifier = RecordingNotifier(called=anyio.Event())
    publisher = NotificationPublisher(notifier)

    assert publisher.dispatch(_notification()) is None
    with anyio.fail_after(1):
        await notifier.called.wait()

    user_id, payload = notifier.calls[0]
    assert user_id == 3
    assert payload["title"] == "New message from Ada"


@pytest.mark.anyio
async def test_delivery_errors_are_logged_not_raised(caplog: pytest.LogCaptureFixture) -> None:
    notifier = RecordingNotifier(called=anyio.Event(), error=RuntimeError("socket exploded"))
    publisher = NotificationPublisher(notifier)

    with caplog.at_level(logging.ERROR, logger="app.infrastructure.notifications.publisher"):
        publisher.dispatch(_notification())
        with anyio.fail_after(1):
            await notifier.called.wait()
        await anyio.sleep(0)

    assert "Realtime delivery of notification 11 failed" in caplog.text


def test_dispatch_without_notifier_is_a_no_op() -> None:
    publisher = NotificationPublisher()

    assert publisher.enabled is False
    assert publisher.dispatch(_notification()) is None


def test_dispatch_outside_any_event_loop_does_not_raise() -> None:
    notifier = RecordingNotifier()
    publisher = NotificationPublisher(notifier)

    publisher.dispatch(_notification())

    assert notifier.calls == []


def test_dispatch_from_worker_thread_reaches_the_loop() -> None:
    notifier = RecordingNotifier()
    publisher = NotificationPublisher(notifier)

    async def main() -> None:
        await anyio.to_thread.run_sync(publisher.dispatch, _notification())

    anyio.run(main)

    assert [user_id for user_id, _ in notifier.calls] == [3]
