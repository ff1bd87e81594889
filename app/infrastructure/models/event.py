"""SQLAlchemy models for events and their registrations."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)

from app.infrastructure.database import Base
from app.utils import utc_now_naive


class EventModel(Base):
    """Database representation of an event."""

    __tablename__ = "event"

    id = Column(Integer, primary_key=True, index=True)
    organizer_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    type = Column(String(30), nullable=False)
    status = Column(String(30), nullable=False, default="UPCOMING", index=True)
    start_date = Column(DateTime, nullable=False, index=True)
    end_date = Column(DateTime, nullable=True)
    location = Column(String(200), nullable=True)
    is_online = Column(Boolean, nullable=False, default=False)
    meeting_url = Column(String(500), nullable=True)
    max_attendees = Column(Integer, nullable=True)
    reminder_sent_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now_naive)
    updated_at = Column(DateTime, nullable=True, onupdate=utc_now_naive)


class EventRegistrationModel(Base):
    """Database representation of a member registered to an event."""

    __tablename__ = "event_registration"
    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_event_registration_user"),
    )

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(
        Integer, ForeignKey("event.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(DateTime, nullable=False, default=utc_now_naive)


__all__ = ["EventModel", "EventRegistrationModel"]
