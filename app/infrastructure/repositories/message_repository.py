"""Persistence helpers for direct messages."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import and_, case, func, or_
from sqlalchemy.orm import Session

from app.domain.entities import Conversation, Message
from app.infrastructure.models import MessageModel
from app.utils import LIKE_ESCAPE, contains_pattern, ensure_utc, to_naive_utc, utc_now


class MessageRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, message: Message) -> Message:
        model = MessageModel(
            sender_id=message.sender_id,
            recipient_id=message.recipient_id,
            subject=message.subject,
            content=message.content,
            is_read=False,
            created_at=to_naive_utc(message.created_at or utc_now()),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get(self, message_id: int) -> Message | None:
        model = self.session.get(MessageModel, message_id)
        return self._to_entity(model) if model else None

    def list_for_user(
        self,
        user_id: int,
        *,
        sent: bool = False,
        search: str | None = None,
        offset: int = 0,
        limit: int | None = 50,
    ) -> tuple[Sequence[Message], int]:
        column = MessageModel.sender_id if sent else MessageModel.recipient_id
        query = self.session.query(MessageModel).filter(column == user_id)
        if search:
            pattern = contains_pattern(search)
            query = query.filter(
                or_(
                    MessageModel.subject.ilike(pattern, escape=LIKE_ESCAPE),
                    MessageModel.content.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        total = query.count()
        query = query.order_by(MessageModel.created_at.desc(), MessageModel.id.desc()).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()], total

    def mark_as_read(self, message_id: int) -> Message | None:
        model = self.session.get(MessageModel, message_id)
        if model is None:
            return None
        if not model.is_read:
            model.is_read = True
            model.read_at = to_naive_utc(utc_now())
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, message_id: int) -> None:
        model = self.session.get(MessageModel, message_id)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()

    def count_unread(self, user_id: int) -> int:
        return (
            self.session.query(MessageModel)
            .filter(MessageModel.recipient_id == user_id, MessageModel.is_read.is_(False))
            .count()
        )

    def list_conversations(
        self, user_id: int, *, offset: int = 0, limit: int | None = 50
    ) -> tuple[Sequence[Conversation], int]:
        """Group ``user_id``'s messages by counterpart, latest exchange first."""

        other_user_id = case(
            (MessageModel.sender_id == user_id, MessageModel.recipient_id),
            else_=MessageModel.sender_id,
        )
        unread = func.sum(
            case(
                (and_(MessageModel.recipient_id == user_id, MessageModel.is_read.is_(False)), 1),
                else_=0,
            )
        )
        last_message_id = func.max(MessageModel.id)
        grouped = (
            self.session.query(
                other_user_id.label("other_user_id"),
                last_message_id.label("last_message_id"),
                func.count(MessageModel.id).label("total_messages"),
                unread.label("unread_count"),
            )
            .filter(or_(MessageModel.sender_id == user_id, MessageModel.recipient_id == user_id))
            .group_by(other_user_id)
        )
        total = grouped.count()
        query = grouped.order_by(last_message_id.desc()).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        rows = query.all()

        last_messages = {
            model.id: self._to_entity(model)
            for model in self.session.query(MessageModel)
            .filter(MessageModel.id.in_([row.last_message_id for row in rows]))
            .all()
        }
        conversations = [
            Conversation(
                other_user_id=row.other_user_id,
                last_message=last_messages[row.last_message_id],
                unread_count=int(row.unread_count or 0),
                total_messages=int(row.total_messages),
            )
            for row in rows
        ]
        return conversations, total

    @staticmethod
    def _to_entity(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            sender_id=model.sender_id,
            recipient_id=model.recipient_id,
            subject=model.subject,
            content=model.content,
            is_read=bool(model.is_read),
            created_at=ensure_utc(model.created_at),
            read_at=ensure_utc(model.read_at),
        )


__all__ = ["MessageRepository"]
