"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import utc_now_naive


class UserModel(Base):
    """Database representation of a platform member."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    profile_type = Column(String(40), nullable=False, index=True)
    company = Column(String(200), nullable=True)
    location = Column(String(200), nullable=True)
    description = Column(Text, nullable=True)
    website = Column(String(500), nullable=True)
    linkedin = Column(String(500), nullable=True)
    phone = Column(String(30), nullable=True)
    verified = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=utc_now_naive)
    updated_at = Column(DateTime, nullable=True, onupdate=utc_now_naive)
    last_login = Column(DateTime, nullable=True)


__all__ = ["UserModel"]
