"""Helpers that build the notifications raised by member activity."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import (
    Application,
    ApplicationStatus,
    Event,
    Message,
    Notification,
    NotificationCategory,
    Opportunity,
    User,
)
from app.infrastructure.notifications import NotificationPublisher

from .create_notification import create_notification

PREVIEW_LENGTH = 50

_STATUS_WORDING = {
    ApplicationStatus.ACCEPTED: "accepted",
    ApplicationStatus.REJECTED: "rejected",
    ApplicationStatus.PENDING: "set back to pending",
}


def message_preview(content: str, length: int = PREVIEW_LENGTH) -> str:
    """Return the first ``length`` characters of ``content``, marking truncation."""

    text = " ".join(content.split())
    if len(text) <= length:
        return text
    return f"{text[:length]}..."


def notify_message_received(
    session: Session,
    publisher: NotificationPublisher,
    *,
    message: Message,
    sender: User,
) -> Notification:
    """Tell the recipient of ``message`` who wrote to them."""

    return create_notification(
        session,
        publisher,
        user_id=message.recipient_id,
        category=NotificationCategory.MESSAGE,
        title=f"New message from {sender.name}",
        body=message_preview(message.content),
        data={"message_id": message.id, "sender_id": sender.id},
        action_url="/messages",
    )


def notify_application_received(
    session: Session,
    publisher: NotificationPublisher,
    *,
    opportunity: Opportunity,
    application: Application,
    applicant: User,
) -> Notification:
    """Inform an opportunity author that someone applied."""

    return create_notification(
        session,
        publisher,
        user_id=opportunity.author_id,
        category=NotificationCategory.APPLICATION_UPDATE,
        title="New application received",
        body=f'{applicant.name} applied to your opportunity "{opportunity.title}"',
        data={
            "opportunity_id": opportunity.id,
            "application_id": application.id,
            "applicant_id": applicant.id,
        },
        action_url=f"/opportunities/{opportunity.id}/applications",
    )


def notify_application_status_changed(
    session: Session,
    publisher: NotificationPublisher,
    *,
    opportunity: Opportunity,
    application: Application,
) -> Notification:
    """Inform an applicant that the author reviewed their application."""

    wording = _STATUS_WORDING[application.status]
    return create_notification(
        session,
        publisher,
        user_id=application.applicant_id,
        category=NotificationCategory.APPLICATION_UPDATE,
        title="Application update",
        body=f'Your application for "{opportunity.title}" was {wording}',
        data={
            "opportunity_id": opportunity.id,
            "application_id": application.id,
            "status": application.status.value,
        },
        action_url=f"/opportunities/{opportunity.id}",
    )


def notify_event_registration(
    session: Session,
    publisher: NotificationPublisher,
    *,
    event: Event,
    attendee: User,
) -> Notification:
    return create_notification(
        session,
        publisher,
        user_id=event.organizer_id,
        category=NotificationCategory.SYSTEM,
        title="New event registration",
        body=f'{attendee.name} registered for "{event.title}"',
        data={"event_id": event.id, "user_id": attendee.id},
        action_url=f"/events/{event.id}",
    )


def notify_event_reminder(
    session: Session,
    publisher: NotificationPublisher,
    *,
    event: Event,
    user_id: int,
) -> Notification:
    starts = event.start_date.strftime("%Y-%m-%d %H:%M UTC")
    return create_notification(
        session,
        publisher,
        user_id=user_id,
        category=NotificationCategory.EVENT_REMINDER,
        title="Event reminder",
        body=f'"{event.title}" starts soon, on {starts}',
        data={"event_id": event.id, "event_date": event.start_date.isoformat()},
        action_url=f"/events/{event.id}",
    )


def notify_system(
    session: Session,
    publisher: NotificationPublisher,
    *,
    user_id: int,
    title: str,
    body: str,
    action_url: str | None = None,
) -> Notification:
    return create_notification(
        session,
        publisher,
        user_id=user_id,
        category=NotificationCategory.SYSTEM,
        title=title,
        body=body,
        action_url=action_url,
    )
