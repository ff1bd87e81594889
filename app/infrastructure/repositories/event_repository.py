"""Persistence helpers for events and registrations."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import Event, EventRegistration, EventStatus, EventType
from app.domain.exceptions import ConflictError
from app.infrastructure.models import EventModel, EventRegistrationModel
from app.utils import LIKE_ESCAPE, contains_pattern, ensure_utc, to_naive_utc, utc_now


class EventRepository:
    """Provide CRUD operations for :class:`Event` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        type: EventType | None = None,
        status: EventStatus | None = None,
        upcoming_after: datetime | None = None,
        search: str | None = None,
        offset: int = 0,
        limit: int | None = 50,
    ) -> tuple[Sequence[Event], int]:
        query = self.session.query(EventModel)
        if type is not None:
            query = query.filter(EventModel.type == type.value)
        if status is not None:
            query = query.filter(EventModel.status == status.value)
        if upcoming_after is not None:
            query = query.filter(EventModel.start_date >= to_naive_utc(upcoming_after))
        if search:
            pattern = contains_pattern(search)
            query = query.filter(
                or_(
                    EventModel.title.ilike(pattern, escape=LIKE_ESCAPE),
                    EventModel.description.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        total = query.count()
        query = query.order_by(EventModel.start_date.asc(), EventModel.id.asc()).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()], total

    def list_due_for_reminder(self, *, now: datetime, until: datetime) -> Sequence[Event]:
        """Return upcoming events starting in ``[now, until]`` without a reminder yet."""

        query = (
            self.session.query(EventModel)
            .filter(EventModel.status == EventStatus.UPCOMING.value)
            .filter(EventModel.reminder_sent_at.is_(None))
            .filter(EventModel.start_date >= to_naive_utc(now))
            .filter(EventModel.start_date <= to_naive_utc(until))
            .order_by(EventModel.start_date.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, event_id: int) -> Event | None:
        model = self.session.get(EventModel, event_id)
        return self._to_entity(model) if model else None

    def create(self, event: Event) -> Event:
        model = EventModel(organizer_id=event.organizer_id)
        self._apply_entity_to_model(model, event)
        model.created_at = to_naive_utc(event.created_at or utc_now())
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, event: Event) -> Event:
        model = self.session.get(EventModel, event.id)
        if model is None:
            msg = f"Event with id {event.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, event)
        model.updated_at = to_naive_utc(utc_now())
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_reminder_sent(self, event_id: int, sent_at: datetime) -> None:
        model = self.session.get(EventModel, event_id)
        if model is None:
            return
        model.reminder_sent_at = to_naive_utc(sent_at)
        self.session.add(model)
        self.session.commit()

    def delete(self, event_id: int) -> None:
        model = self.session.get(EventModel, event_id)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()

    # Registrations ------------------------------------------------------

    def create_registration(self, registration: EventRegistration) -> EventRegistration:
        model = EventRegistrationModel(
            event_id=registration.event_id,
            user_id=registration.user_id,
            created_at=to_naive_utc(registration.created_at or utc_now()),
        )
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise ConflictError("You are already registered for this event") from exc
        self.session.refresh(model)
        return self._registration_to_entity(model)

    def find_registration(self, *, event_id: int, user_id: int) -> EventRegistration | None:
        model = (
            self.session.query(EventRegistrationModel)
            .filter(
                EventRegistrationModel.event_id == event_id,
                EventRegistrationModel.user_id == user_id,
            )
            .first()
        )
        return self._registration_to_entity(model) if model else None

    def delete_registration(self, registration_id: int) -> None:
        model = self.session.get(EventRegistrationModel, registration_id)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()

    def count_registrations(self, event_id: int) -> int:
        return (
            self.session.query(EventRegistrationModel)
            .filter(EventRegistrationModel.event_id == event_id)
            .count()
        )

    def list_registrations(
        self,
        *,
        event_id: int | None = None,
        user_id: int | None = None,
        offset: int = 0,
        limit: int | None = 50,
    ) -> tuple[Sequence[EventRegistration], int]:
        query = self.session.query(EventRegistrationModel)
        if event_id is not None:
            query = query.filter(EventRegistrationModel.event_id == event_id)
        if user_id is not None:
            query = query.filter(EventRegistrationModel.user_id == user_id)
        total = query.count()
        query = query.order_by(
            EventRegistrationModel.created_at.desc(), EventRegistrationModel.id.desc()
        ).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [self._registration_to_entity(model) for model in query.all()], total

    @staticmethod
    def _apply_entity_to_model(model: EventModel, event: Event) -> None:
        model.title = event.title
        model.description = event.description
        model.type = event.type.value
        model.status = event.status.value
        model.start_date = to_naive_utc(event.start_date)
        model.end_date = to_naive_utc(event.end_date)
        model.location = event.location
        model.is_online = event.is_online
        model.meeting_url = event.meeting_url
        model.max_attendees = event.max_attendees
        model.reminder_sent_at = to_naive_utc(event.reminder_sent_at)

    @staticmethod
    def _to_entity(model: EventModel) -> Event:
        return Event(
            id=model.id,
            organizer_id=model.organizer_id,
            title=model.title,
            description=model.description,
            type=EventType(model.type),
            status=EventStatus(model.status),
            start_date=ensure_utc(model.start_date),
            end_date=ensure_utc(model.end_date),
            location=model.location,
            is_online=bool(model.is_online),
            meeting_url=model.meeting_url,
            max_attendees=model.max_attendees,
            reminder_sent_at=ensure_utc(model.reminder_sent_at),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )

    @staticmethod
    def _registration_to_entity(model: EventRegistrationModel) -> EventRegistration:
        return EventRegistration(
            id=model.id,
            event_id=model.event_id,
            user_id=model.user_id,
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["EventRepository"]
