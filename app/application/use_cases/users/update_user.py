"""Use case for updating a member profile."""

from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.exceptions import ConflictError, NotFoundError
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash

_PROFILE_FIELDS = ("name", "company", "location", "description", "website", "linkedin", "phone")


def update_user(
    session: Session,
    *,
    user_id: int,
    email: str | None = None,
    password: str | None = None,
    **changes: str | None,
) -> User:
    """Apply the provided profile changes; ``None`` leaves a field untouched."""

    unknown = set(changes) - set(_PROFILE_FIELDS)
    if unknown:
        raise TypeError(f"Unexpected profile fields: {', '.join(sorted(unknown))}")

    repository = UserRepository(session)
    current_user = repository.get(user_id)
    if current_user is None:
        raise NotFoundError("User not found")

    new_email = current_user.email
    if email is not None and email.strip().lower() != current_user.email:
        existing = repository.get_by_email(email)
        if existing and existing.id != user_id:
            raise ConflictError("Email address is already registered")
        new_email = email.strip().lower()

    updated_user = replace(
        current_user,
        email=new_email,
        **{field: value for field, value in changes.items() if value is not None},
    )
    if password:
        updated_user = replace(updated_user, password=get_password_hash(password))

    return repository.update(updated_user)
