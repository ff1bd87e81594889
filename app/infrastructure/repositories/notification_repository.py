"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.domain.entities import Notification, NotificationCategory
from app.infrastructure.models import NotificationModel
from app.utils import LIKE_ESCAPE, contains_pattern, ensure_utc, to_naive_utc, utc_now


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects.

    Every lookup that takes a ``user_id`` is scoped to that owner so a
    notification belonging to someone else behaves exactly like a missing one.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            user_id=notification.user_id,
            category=notification.category.value,
            title=notification.title,
            body=notification.body,
            data=notification.data,
            action_url=notification.action_url,
            is_read=False,
            created_at=to_naive_utc(notification.created_at or utc_now()),
            read_at=None,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get_for_user(self, notification_id: int, *, user_id: int) -> Notification | None:
        model = self._get_owned_model(notification_id, user_id)
        return self._to_entity(model) if model else None

    def list_for_user(
        self,
        user_id: int,
        *,
        category: NotificationCategory | None = None,
        is_read: bool | None = None,
        search: str | None = None,
        offset: int = 0,
        limit: int | None = 50,
    ) -> tuple[Sequence[Notification], int]:
        """Return one page of ``user_id``'s notifications and the total match count."""

        query = self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        )
        if category is not None:
            query = query.filter(NotificationModel.category == category.value)
        if is_read is not None:
            query = query.filter(NotificationModel.is_read.is_(is_read))
        if search:
            pattern = contains_pattern(search)
            query = query.filter(
                or_(
                    NotificationModel.title.ilike(pattern, escape=LIKE_ESCAPE),
                    NotificationModel.body.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )

        total = query.count()
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        ).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()], total

    def mark_as_read(self, notification_id: int, *, user_id: int) -> Notification | None:
        """Flip ``is_read`` to ``True``; already read notifications are left untouched."""

        model = self._get_owned_model(notification_id, user_id)
        if model is None:
            return None
        if not model.is_read:
            model.is_read = True
            model.read_at = to_naive_utc(utc_now())
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def mark_all_as_read(self, user_id: int) -> int:
        count = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .update(
                {
                    NotificationModel.is_read: True,
                    NotificationModel.read_at: to_naive_utc(utc_now()),
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return count

    def delete(self, notification_id: int, *, user_id: int) -> bool:
        model = self._get_owned_model(notification_id, user_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    def count_unread(self, user_id: int) -> int:
        return (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .count()
        )

    def delete_read_older_than(self, cutoff: datetime) -> int:
        """Remove read notifications created before ``cutoff``."""

        count = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.is_read.is_(True),
                NotificationModel.created_at < to_naive_utc(cutoff),
            )
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return count

    def _get_owned_model(self, notification_id: int, user_id: int) -> NotificationModel | None:
        return (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.user_id == user_id,
            )
            .first()
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            category=NotificationCategory(model.category),
            title=model.title,
            body=model.body,
            data=model.data,
            action_url=model.action_url,
            is_read=bool(model.is_read),
            created_at=ensure_utc(model.created_at),
            read_at=ensure_utc(model.read_at),
        )


__all__ = ["NotificationRepository"]
