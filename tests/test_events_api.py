"""Tests for events, registrations and reminder notifications."""

from __future__ import annotations

from datetime import timedelta

from app.application.use_cases.events import (
    create_event,
    register_for_event,
    send_event_reminders,
)
from app.domain.entities import EventType
from app.infrastructure.notifications import NotificationPublisher
from app.infrastructure.repositories import NotificationRepository
from app.utils import utc_now

API = "/api/v1"


def _event_payload(**overrides) -> dict:
    payload = {
        "title": "Founders breakfast",
        "description": "Monthly breakfast for founders and investors.",
        "type": "NETWORKING",
        "start_date": (utc_now() + timedelta(days=3)).isoformat(),
        "location": "Madrid",
    }
    payload.update(overrides)
    return payload


def _schedule(client, headers, **overrides) -> dict:
    response = client.post(f"{API}/events", json=_event_payload(**overrides), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_registration_notifies_the_organizer(client, make_user, headers_for) -> None:
    organizer = make_user()
    attendee = make_user("Grace Hopper")
    event = _schedule(client, headers_for(organizer))

    response = client.post(f"{API}/events/{event['id']}/register", headers=headers_for(attendee))

    assert response.status_code == 201
    assert response.json()["data"]["user_id"] == attendee.id
    notifications = client.get(f"{API}/notifications", headers=headers_for(organizer)).json()
    [notification] = notifications["data"]
    assert notification["title"] == "New event registration"
    assert "Grace Hopper" in notification["body"]
    assert notification["data"] == {"event_id": event["id"], "user_id": attendee.id}


def test_organizer_registering_is_not_notified(client, make_user, headers_for) -> None:
    organizer = make_user()
    event = _schedule(client, headers_for(organizer))

    response = client.post(f"{API}/events/{event['id']}/register", headers=headers_for(organizer))

    assert response.status_code == 201
    unread = client.get(f"{API}/notifications/unread/count", headers=headers_for(organizer))
    assert unread.json()["data"] == {"count": 0}


def test_registration_rules(client, make_user, headers_for) -> None:
    organizer = make_user()
    first = make_user()
    event = _schedule(client, headers_for(organizer), max_attendees=1)
    url = f"{API}/events/{event['id']}/register"

    assert client.post(url, headers=headers_for(first)).status_code == 201
    assert client.post(url, headers=headers_for(first)).status_code == 409
    assert client.post(url, headers=headers_for(make_user())).status_code == 400

    assert client.delete(url, headers=headers_for(first)).status_code == 200
    assert client.delete(url, headers=headers_for(first)).status_code == 404
    assert client.post(url, headers=headers_for(make_user())).status_code == 201


def test_cannot_register_for_past_or_cancelled_events(client, make_user, headers_for) -> None:
    organizer = make_user()
    attendee = make_user()
    past = _schedule(
        client,
        headers_for(organizer),
        start_date=(utc_now() - timedelta(days=1)).isoformat(),
    )
    cancelled = _schedule(client, headers_for(organizer))
    client.put(
        f"{API}/events/{cancelled['id']}",
        json={"status": "CANCELLED"},
        headers=headers_for(organizer),
    )

    for event in (past, cancelled):
        response = client.post(f"{API}/events/{event['id']}/register", headers=headers_for(attendee))
        assert response.status_code == 400


def test_schedule_validation_and_ownership(client, make_user, headers_for) -> None:
    organizer = make_user()
    other = make_user()
    start = utc_now() + timedelta(days=2)

    bad = client.post(
        f"{API}/events",
        json=_event_payload(
            start_date=start.isoformat(), end_date=(start - timedelta(hours=1)).isoformat()
        ),
        headers=headers_for(organizer),
    )
    event = _schedule(client, headers_for(organizer))

    assert bad.status_code == 400
    assert client.put(
        f"{API}/events/{event['id']}", json={"title": "Hijacked"}, headers=headers_for(other)
    ).status_code == 403
    assert client.get(
        f"{API}/events/{event['id']}/registrations", headers=headers_for(other)
    ).status_code == 403


def test_reminders_are_sent_once_per_event(session, make_user) -> None:
    organizer = make_user()
    attendees = [make_user(), make_user()]
    soon = create_event(
        session,
        organizer_id=organizer.id,
        title="Pitch night",
        description="Startups pitch to a panel of investors.",
        type=EventType.MEETUP,
        start_date=utc_now() + timedelta(hours=5),
    )
    later = create_event(
        session,
        organizer_id=organizer.id,
        title="Annual conference",
        description="The yearly gathering of the whole network.",
        type=EventType.CONFERENCE,
        start_date=utc_now() + timedelta(days=20),
    )
    publisher = NotificationPublisher()
    for attendee in attendees:
        register_for_event(session, publisher, event_id=soon.id, attendee=attendee)
        register_for_event(session, publisher, event_id=later.id, attendee=attendee)

    assert send_event_reminders(session, publisher, window_hours=24) == 2
    assert send_event_reminders(session, publisher, window_hours=24) == 0

    notifications, total = NotificationRepository(session).list_for_user(attendees[0].id)
    assert total == 1
    assert notifications[0].category.value == "EVENT_REMINDER"
    assert notifications[0].data["event_id"] == soon.id
