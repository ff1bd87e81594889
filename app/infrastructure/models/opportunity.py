"""SQLAlchemy models for opportunities and applications."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    JSON,
    String,
    Text,
    UniqueConstraint,
)

from app.infrastructure.database import Base
from app.utils import utc_now_naive


class OpportunityModel(Base):
    """Database representation of a published opportunity."""

    __tablename__ = "opportunity"

    id = Column(Integer, primary_key=True, index=True)
    author_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    type = Column(String(30), nullable=False, index=True)
    status = Column(String(30), nullable=False, default="ACTIVE", index=True)
    budget = Column(String(100), nullable=True)
    location = Column(String(200), nullable=True)
    remote = Column(Boolean, nullable=False, default=False)
    deadline = Column(DateTime, nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, nullable=False, default=utc_now_naive)
    updated_at = Column(DateTime, nullable=True, onupdate=utc_now_naive)


class ApplicationModel(Base):
    """Database representation of an application to an opportunity."""

    __tablename__ = "application"
    __table_args__ = (
        UniqueConstraint("opportunity_id", "applicant_id", name="uq_application_applicant"),
    )

    id = Column(Integer, primary_key=True, index=True)
    opportunity_id = Column(
        Integer,
        ForeignKey("opportunity.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    applicant_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    cover_letter = Column(Text, nullable=False)
    expected_budget = Column(String(100), nullable=True)
    status = Column(String(30), nullable=False, default="PENDING")
    created_at = Column(DateTime, nullable=False, default=utc_now_naive)
    updated_at = Column(DateTime, nullable=True, onupdate=utc_now_naive)


__all__ = ["ApplicationModel", "OpportunityModel"]
