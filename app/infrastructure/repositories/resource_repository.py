"""Persistence helpers for library resources."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.domain.entities import Resource, ResourceType
from app.infrastructure.models import ResourceModel, ResourceTagModel
from app.utils import LIKE_ESCAPE, contains_pattern, ensure_utc, to_naive_utc, utc_now


class ResourceRepository:
    """Provide CRUD operations for :class:`Resource` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        type: ResourceType | None = None,
        author_id: int | None = None,
        is_premium: bool | None = None,
        tag: str | None = None,
        search: str | None = None,
        most_viewed: bool = False,
        offset: int = 0,
        limit: int | None = 50,
    ) -> tuple[Sequence[Resource], int]:
        """Return one page of resources, newest first unless ``most_viewed``."""

        query = self.session.query(ResourceModel)
        if type is not None:
            query = query.filter(ResourceModel.type == type.value)
        if author_id is not None:
            query = query.filter(ResourceModel.author_id == author_id)
        if is_premium is not None:
            query = query.filter(ResourceModel.is_premium.is_(is_premium))
        if tag:
            query = query.filter(
                ResourceModel.tags.any(
                    ResourceTagModel.tag.ilike(contains_pattern(tag), escape=LIKE_ESCAPE)
                )
            )
        if search:
            pattern = contains_pattern(search)
            query = query.filter(
                or_(
                    ResourceModel.title.ilike(pattern, escape=LIKE_ESCAPE),
                    ResourceModel.description.ilike(pattern, escape=LIKE_ESCAPE),
                    ResourceModel.content.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )

        total = query.count()
        if most_viewed:
            query = query.order_by(ResourceModel.view_count.desc(), ResourceModel.id.desc())
        else:
            query = query.order_by(ResourceModel.created_at.desc(), ResourceModel.id.desc())
        query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()], total

    def get(self, resource_id: int) -> Resource | None:
        model = self.session.get(ResourceModel, resource_id)
        return self._to_entity(model) if model else None

    def create(self, resource: Resource) -> Resource:
        model = ResourceModel(author_id=resource.author_id, view_count=0)
        self._apply_entity_to_model(model, resource)
        model.created_at = to_naive_utc(resource.created_at or utc_now())
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, resource: Resource) -> Resource:
        model = self.session.get(ResourceModel, resource.id)
        if model is None:
            msg = f"Resource with id {resource.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, resource)
        model.updated_at = to_naive_utc(utc_now())
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def increment_views(self, resource_id: int) -> Resource | None:
        """Count one more view in a single UPDATE and return the fresh row."""

        updated = (
            self.session.query(ResourceModel)
            .filter(ResourceModel.id == resource_id)
            .update(
                {ResourceModel.view_count: ResourceModel.view_count + 1},
                synchronize_session=False,
            )
        )
        self.session.commit()
        if not updated:
            return None
        model = self.session.get(ResourceModel, resource_id, populate_existing=True)
        return self._to_entity(model) if model else None

    def delete(self, resource_id: int) -> None:
        model = self.session.get(ResourceModel, resource_id)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: ResourceModel, resource: Resource) -> None:
        model.title = resource.title
        model.description = resource.description
        model.content = resource.content
        model.url = resource.url
        model.thumbnail = resource.thumbnail
        model.type = resource.type.value
        model.is_premium = resource.is_premium

        wanted = list(dict.fromkeys(tag.strip() for tag in resource.tags if tag.strip()))
        existing = {tag.tag: tag for tag in model.tags}
        model.tags = [existing.get(tag) or ResourceTagModel(tag=tag) for tag in wanted]

    @staticmethod
    def _to_entity(model: ResourceModel) -> Resource:
        return Resource(
            id=model.id,
            author_id=model.author_id,
            title=model.title,
            description=model.description,
            type=ResourceType(model.type),
            content=model.content,
            url=model.url,
            thumbnail=model.thumbnail,
            is_premium=bool(model.is_premium),
            view_count=model.view_count or 0,
            tags=[tag.tag for tag in model.tags],
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )


__all__ = ["ResourceRepository"]
