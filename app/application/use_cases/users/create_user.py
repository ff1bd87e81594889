"""Use case for registering members."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import ProfileType, User
from app.domain.exceptions import ConflictError
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash
from app.utils import utc_now

logger = logging.getLogger(__name__)


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    profile_type: ProfileType,
    company: str | None = None,
    location: str | None = None,
    phone: str | None = None,
    verified: bool = False,
) -> User:
    """Create a new member ensuring unique email addresses."""

    repository = UserRepository(session)
    if repository.get_by_email(email):
        raise ConflictError("Email address is already registered")

    user = User(
        id=None,
        name=name.strip(),
        email=email.strip().lower(),
        password=get_password_hash(password),
        profile_type=profile_type,
        company=company,
        location=location,
        phone=phone,
        verified=verified,
        is_active=True,
        created_at=utc_now(),
    )
    created = repository.create(user)
    logger.info("Registered user %s (%s)", created.id, created.profile_type.value)
    return created
