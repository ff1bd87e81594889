"""Persistence helpers for opportunities and their applications."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import (
    Application,
    ApplicationStatus,
    Opportunity,
    OpportunityStatus,
    OpportunityType,
)
from app.domain.exceptions import ConflictError
from app.infrastructure.models import ApplicationModel, OpportunityModel
from app.utils import LIKE_ESCAPE, contains_pattern, ensure_utc, to_naive_utc, utc_now


class OpportunityRepository:
    """Provide CRUD operations for :class:`Opportunity` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        type: OpportunityType | None = None,
        status: OpportunityStatus | None = None,
        author_id: int | None = None,
        search: str | None = None,
        offset: int = 0,
        limit: int | None = 50,
    ) -> tuple[Sequence[Opportunity], int]:
        query = self.session.query(OpportunityModel)
        if type is not None:
            query = query.filter(OpportunityModel.type == type.value)
        if status is not None:
            query = query.filter(OpportunityModel.status == status.value)
        if author_id is not None:
            query = query.filter(OpportunityModel.author_id == author_id)
        if search:
            pattern = contains_pattern(search)
            query = query.filter(
                or_(
                    OpportunityModel.title.ilike(pattern, escape=LIKE_ESCAPE),
                    OpportunityModel.description.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        total = query.count()
        query = query.order_by(
            OpportunityModel.created_at.desc(), OpportunityModel.id.desc()
        ).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()], total

    def get(self, opportunity_id: int) -> Opportunity | None:
        model = self.session.get(OpportunityModel, opportunity_id)
        return self._to_entity(model) if model else None

    def create(self, opportunity: Opportunity) -> Opportunity:
        model = OpportunityModel(author_id=opportunity.author_id)
        self._apply_entity_to_model(model, opportunity)
        model.created_at = to_naive_utc(opportunity.created_at or utc_now())
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, opportunity: Opportunity) -> Opportunity:
        model = self.session.get(OpportunityModel, opportunity.id)
        if model is None:
            msg = f"Opportunity with id {opportunity.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, opportunity)
        model.updated_at = to_naive_utc(utc_now())
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, opportunity_id: int) -> None:
        model = self.session.get(OpportunityModel, opportunity_id)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()

    # Applications -------------------------------------------------------

    def create_application(self, application: Application) -> Application:
        model = ApplicationModel(
            opportunity_id=application.opportunity_id,
            applicant_id=application.applicant_id,
            cover_letter=application.cover_letter,
            expected_budget=application.expected_budget,
            status=application.status.value,
            created_at=to_naive_utc(application.created_at or utc_now()),
        )
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise ConflictError("You already applied to this opportunity") from exc
        self.session.refresh(model)
        return self._application_to_entity(model)

    def get_application(self, application_id: int) -> Application | None:
        model = self.session.get(ApplicationModel, application_id)
        return self._application_to_entity(model) if model else None

    def find_application(self, *, opportunity_id: int, applicant_id: int) -> Application | None:
        model = (
            self.session.query(ApplicationModel)
            .filter(
                ApplicationModel.opportunity_id == opportunity_id,
                ApplicationModel.applicant_id == applicant_id,
            )
            .first()
        )
        return self._application_to_entity(model) if model else None

    def list_applications(
        self,
        *,
        opportunity_id: int | None = None,
        applicant_id: int | None = None,
        offset: int = 0,
        limit: int | None = 50,
    ) -> tuple[Sequence[Application], int]:
        query = self.session.query(ApplicationModel)
        if opportunity_id is not None:
            query = query.filter(ApplicationModel.opportunity_id == opportunity_id)
        if applicant_id is not None:
            query = query.filter(ApplicationModel.applicant_id == applicant_id)
        total = query.count()
        query = query.order_by(
            ApplicationModel.created_at.desc(), ApplicationModel.id.desc()
        ).offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [self._application_to_entity(model) for model in query.all()], total

    def update_application_status(
        self, application_id: int, status: ApplicationStatus
    ) -> Application | None:
        model = self.session.get(ApplicationModel, application_id)
        if model is None:
            return None
        model.status = status.value
        model.updated_at = to_naive_utc(utc_now())
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._application_to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: OpportunityModel, opportunity: Opportunity) -> None:
        model.title = opportunity.title
        model.description = opportunity.description
        model.type = opportunity.type.value
        model.status = opportunity.status.value
        model.budget = opportunity.budget
        model.location = opportunity.location
        model.remote = opportunity.remote
        model.deadline = to_naive_utc(opportunity.deadline)
        model.tags = list(opportunity.tags or [])

    @staticmethod
    def _to_entity(model: OpportunityModel) -> Opportunity:
        return Opportunity(
            id=model.id,
            author_id=model.author_id,
            title=model.title,
            description=model.description,
            type=OpportunityType(model.type),
            status=OpportunityStatus(model.status),
            budget=model.budget,
            location=model.location,
            remote=bool(model.remote),
            deadline=ensure_utc(model.deadline),
            tags=list(model.tags or []),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )

    @staticmethod
    def _application_to_entity(model: ApplicationModel) -> Application:
        return Application(
            id=model.id,
            opportunity_id=model.opportunity_id,
            applicant_id=model.applicant_id,
            cover_letter=model.cover_letter,
            expected_budget=model.expected_budget,
            status=ApplicationStatus(model.status),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )


__all__ = ["OpportunityRepository"]
