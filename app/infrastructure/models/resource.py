"""SQLAlchemy models for library resources and their tags."""

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
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import utc_now_naive


class ResourceModel(Base):
    """Database representation of a shared resource."""

    __tablename__ = "resource"

    id = Column(Integer, primary_key=True, index=True)
    author_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    content = Column(Text, nullable=True)
    url = Column(String(500), nullable=True)
    thumbnail = Column(String(500), nullable=True)
    type = Column(String(30), nullable=False, index=True)
    is_premium = Column(Boolean, nullable=False, default=False)
    view_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=utc_now_naive)
    updated_at = Column(DateTime, nullable=True, onupdate=utc_now_naive)

    tags = relationship(
        "ResourceTagModel",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="ResourceTagModel.id",
    )


class ResourceTagModel(Base):
    """One free-form tag attached to a resource."""

    __tablename__ = "resource_tag"
    __table_args__ = (UniqueConstraint("resource_id", "tag", name="uq_resource_tag"),)

    id = Column(Integer, primary_key=True, index=True)
    resource_id = Column(
        Integer, ForeignKey("resource.id", ondelete="CASCADE"), nullable=False, index=True
    )
    tag = Column(String(50), nullable=False, index=True)


__all__ = ["ResourceModel", "ResourceTagModel"]
