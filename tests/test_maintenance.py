"""Tests for the cron entry points in ``scripts/notification_maintenance.py``."""

from __future__ import annotations

from datetime import timedelta

import pytest

from app.application.use_cases.events import create_event, register_for_event
from app.application.use_cases.notifications import (
    create_notification,
    mark_all_notifications_as_read,
)
from app.domain.entities import EventType, NotificationCategory
from app.infrastructure.notifications import NotificationPublisher
from app.infrastructure.repositories import NotificationRepository
from app.utils import utc_now
from scripts.notification_maintenance import parse_args, run


def test_parse_args_requires_a_command() -> None:
    with pytest.raises(SystemExit):
        parse_args([])

    assert parse_args(["purge", "--days", "7"]).days == 7
    assert parse_args(["remind"]).hours is None


def test_purge_removes_only_read_notifications(session, make_user) -> None:
    user = make_user()
    publisher = NotificationPublisher()
    for title in ("First", "Second"):
        create_notification(
            session,
            publisher,
            user_id=user.id,
            category=NotificationCategory.SYSTEM,
            title=title,
            body="Body",
        )
    mark_all_notifications_as_read(session, user_id=user.id)
    create_notification(
        session,
        publisher,
        user_id=user.id,
        category=NotificationCategory.SYSTEM,
        title="Fresh",
        body="Body",
    )

    assert run(parse_args(["purge", "--days", "0"])) == 2

    session.expire_all()
    remaining, total = NotificationRepository(session).list_for_user(user.id)
    assert total == 1
    assert remaining[0].title == "Fresh"


def test_remind_creates_event_reminders(session, make_user) -> None:
    organizer = make_user()
    attendee = make_user()
    event = create_event(
        session,
        organizer_id=organizer.id,
        title="Demo day",
        description="Graduating startups present their products.",
        type=EventType.CONFERENCE,
        start_date=utc_now() + timedelta(hours=2),
    )
    register_for_event(session, NotificationPublisher(), event_id=event.id, attendee=attendee)

    assert run(parse_args(["remind", "--hours", "6"])) == 1
    assert run(parse_args(["remind", "--hours", "6"])) == 0
