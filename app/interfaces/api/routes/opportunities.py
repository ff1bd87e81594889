"""Opportunity and application endpoints."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.opportunities import (
    apply_to_opportunity,
    create_opportunity,
    delete_opportunity,
    get_opportunity,
    list_my_applications,
    list_opportunities,
    list_opportunity_applications,
    update_application_status,
    update_opportunity,
)
from app.domain.entities import OpportunityStatus, OpportunityType, User
from app.domain.pagination import PageRequest
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationPublisher
from app.interfaces.api.dependencies import get_current_active_user, get_notification_publisher
from app.interfaces.api.routes_helpers import page_request, raise_http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    ApplicationCreate,
    ApplicationRead,
    ApplicationStatusUpdate,
    OpportunityCreate,
    OpportunityRead,
    OpportunityUpdate,
    PaginationMeta,
)

router = APIRouter(prefix="/opportunities", tags=["opportunities"])


@router.post("", response_model=ApiResponse[OpportunityRead], status_code=status.HTTP_201_CREATED)
def publish(
    payload: OpportunityCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    opportunity = create_opportunity(db, author_id=current_user.id, **payload.model_dump())
    return ApiResponse(data=OpportunityRead.model_validate(opportunity), message="Opportunity published")


@router.get("", response_model=ApiResponse[list[OpportunityRead]])
def browse(
    type: OpportunityType | None = None,
    status_filter: OpportunityStatus | None = Query(OpportunityStatus.ACTIVE, alias="status"),
    author_id: int | None = None,
    search: str | None = Query(None, max_length=100),
    pagination: PageRequest = Depends(page_request),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    page = list_opportunities(
        db,
        page_request=pagination,
        type=type,
        status=status_filter,
        author_id=author_id,
        search=search,
    )
    return ApiResponse(
        data=[OpportunityRead.model_validate(item) for item in page.items],
        meta=PaginationMeta.from_page(page),
    )


@router.get("/applications/mine", response_model=ApiResponse[list[ApplicationRead]])
def my_applications(
    pagination: PageRequest = Depends(page_request),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    page = list_my_applications(db, user_id=current_user.id, page_request=pagination)
    return ApiResponse(
        data=[ApplicationRead.model_validate(item) for item in page.items],
        meta=PaginationMeta.from_page(page),
    )


@router.put("/applications/{application_id}/status", response_model=ApiResponse[ApplicationRead])
def review_application(
    application_id: int,
    payload: ApplicationStatusUpdate,
    db: Session = Depends(get_db),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
    current_user: User = Depends(get_current_active_user),
):
    """Accept or reject an application; the applicant is notified."""

    try:
        application = update_application_status(
            db, publisher, application_id, user_id=current_user.id, status=payload.status
        )
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=ApplicationRead.model_validate(application))


@router.get("/{opportunity_id}", response_model=ApiResponse[OpportunityRead])
def read_opportunity(
    opportunity_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    try:
        opportunity = get_opportunity(db, opportunity_id)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=OpportunityRead.model_validate(opportunity))


@router.put("/{opportunity_id}", response_model=ApiResponse[OpportunityRead])
def edit_opportunity(
    opportunity_id: int,
    payload: OpportunityUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        opportunity = update_opportunity(
            db,
            opportunity_id,
            user_id=current_user.id,
            changes=payload.model_dump(exclude_unset=True),
        )
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=OpportunityRead.model_validate(opportunity))


@router.delete("/{opportunity_id}", response_model=ApiResponse[None])
def remove_opportunity(
    opportunity_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        delete_opportunity(db, opportunity_id, user_id=current_user.id)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(message="Opportunity deleted")


@router.post(
    "/{opportunity_id}/apply",
    response_model=ApiResponse[ApplicationRead],
    status_code=status.HTTP_201_CREATED,
)
def apply(
    opportunity_id: int,
    payload: ApplicationCreate,
    db: Session = Depends(get_db),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
    current_user: User = Depends(get_current_active_user),
):
    """Apply to an opportunity; its author is notified."""

    try:
        application = apply_to_opportunity(
            db,
            publisher,
            opportunity_id=opportunity_id,
            applicant=current_user,
            cover_letter=payload.cover_letter,
            expected_budget=payload.expected_budget,
        )
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=ApplicationRead.model_validate(application), message="Application sent")


@router.get("/{opportunity_id}/applications", response_model=ApiResponse[list[ApplicationRead]])
def opportunity_applications(
    opportunity_id: int,
    pagination: PageRequest = Depends(page_request),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        page = list_opportunity_applications(
            db, opportunity_id, user_id=current_user.id, page_request=pagination
        )
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(
        data=[ApplicationRead.model_validate(item) for item in page.items],
        meta=PaginationMeta.from_page(page),
    )
