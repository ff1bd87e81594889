"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.domain.entities import ProfileType, User
from app.infrastructure.models import UserModel
from app.utils import LIKE_ESCAPE, contains_pattern, ensure_utc, to_naive_utc, utc_now


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        profile_type: ProfileType | None = None,
        search: str | None = None,
        offset: int = 0,
        limit: int | None = 100,
    ) -> tuple[Sequence[User], int]:
        query = self.session.query(UserModel).filter(UserModel.is_active.is_(True))
        if profile_type is not None:
            query = query.filter(UserModel.profile_type == profile_type.value)
        if search:
            pattern = contains_pattern(search)
            query = query.filter(
                or_(
                    UserModel.name.ilike(pattern, escape=LIKE_ESCAPE),
                    UserModel.company.ilike(pattern, escape=LIKE_ESCAPE),
                    UserModel.location.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        total = query.count()
        query = query.order_by(UserModel.created_at.desc(), UserModel.id.desc()).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()], total

    def list_active_ids(self) -> list[int]:
        query = self.session.query(UserModel.id).filter(UserModel.is_active.is_(True))
        return [user_id for (user_id,) in query.all()]

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(UserModel.email == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        model.password = user.password
        model.created_at = to_naive_utc(user.created_at or utc_now())
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if model is None:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        model.password = user.password
        model.updated_at = to_naive_utc(utc_now())
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def record_login(self, user_id: int) -> None:
        model = self.session.get(UserModel, user_id)
        if model is None:
            return
        model.last_login = to_naive_utc(utc_now())
        self.session.add(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email.strip().lower()
        model.profile_type = user.profile_type.value
        model.company = user.company
        model.location = user.location
        model.description = user.description
        model.website = user.website
        model.linkedin = user.linkedin
        model.phone = user.phone
        model.verified = user.verified
        model.is_active = user.is_active

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
            profile_type=ProfileType(model.profile_type),
            company=model.company,
            location=model.location,
            description=model.description,
            website=model.website,
            linkedin=model.linkedin,
            phone=model.phone,
            verified=bool(model.verified),
            is_active=bool(model.is_active),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
            last_login=ensure_utc(model.last_login),
        )


__all__ = ["UserRepository"]
