"""Event and registration endpoints."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.events import (
    cancel_registration,
    create_event,
    delete_event,
    get_event,
    list_event_registrations,
    list_events,
    list_my_registrations,
    register_for_event,
    update_event,
)
from app.domain.entities import EventStatus, EventType, User
from app.domain.pagination import PageRequest
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationPublisher
from app.interfaces.api.dependencies import get_current_active_user, get_notification_publisher
from app.interfaces.api.routes_helpers import page_request, raise_http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    EventCreate,
    EventRead,
    EventRegistrationRead,
    EventUpdate,
    PaginationMeta,
)

router = APIRouter(prefix="/events", tags=["events"])


@router.post("", response_model=ApiResponse[EventRead], status_code=status.HTTP_201_CREATED)
def schedule(
    payload: EventCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        event = create_event(db, organizer_id=current_user.id, **payload.model_dump())
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=EventRead.model_validate(event), message="Event created")


@router.get("", response_model=ApiResponse[list[EventRead]])
def browse(
    type: EventType | None = None,
    status_filter: EventStatus | None = Query(None, alias="status"),
    upcoming: bool = False,
    search: str | None = Query(None, max_length=100),
    pagination: PageRequest = Depends(page_request),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    page = list_events(
        db,
        page_request=pagination,
        type=type,
        status=status_filter,
        upcoming_only=upcoming,
        search=search,
    )
    return ApiResponse(
        data=[EventRead.model_validate(item) for item in page.items],
        meta=PaginationMeta.from_page(page),
    )


@router.get("/registrations/mine", response_model=ApiResponse[list[EventRegistrationRead]])
def my_registrations(
    pagination: PageRequest = Depends(page_request),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    page = list_my_registrations(db, user_id=current_user.id, page_request=pagination)
    return ApiResponse(
        data=[EventRegistrationRead.model_validate(item) for item in page.items],
        meta=PaginationMeta.from_page(page),
    )


@router.get("/{event_id}", response_model=ApiResponse[EventRead])
def read_event(
    event_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    try:
        event = get_event(db, event_id)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=EventRead.model_validate(event))


@router.put("/{event_id}", response_model=ApiResponse[EventRead])
def edit_event(
    event_id: int,
    payload: EventUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        event = update_event(
            db, event_id, user_id=current_user.id, changes=payload.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=EventRead.model_validate(event))


@router.delete("/{event_id}", response_model=ApiResponse[None])
def remove_event(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        delete_event(db, event_id, user_id=current_user.id)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(message="Event deleted")


@router.post(
    "/{event_id}/register",
    response_model=ApiResponse[EventRegistrationRead],
    status_code=status.HTTP_201_CREATED,
)
def register(
    event_id: int,
    db: Session = Depends(get_db),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
    current_user: User = Depends(get_current_active_user),
):
    try:
        registration = register_for_event(db, publisher, event_id=event_id, attendee=current_user)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(
        data=EventRegistrationRead.model_validate(registration), message="Registered for event"
    )


@router.delete("/{event_id}/register", response_model=ApiResponse[None])
def unregister(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        cancel_registration(db, event_id=event_id, user_id=current_user.id)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(message="Registration cancelled")


@router.get("/{event_id}/registrations", response_model=ApiResponse[list[EventRegistrationRead]])
def event_registrations(
    event_id: int,
    pagination: PageRequest = Depends(page_request),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        page = list_event_registrations(
            db, event_id, user_id=current_user.id, page_request=pagination
        )
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(
        data=[EventRegistrationRead.model_validate(item) for item in page.items],
        meta=PaginationMeta.from_page(page),
    )
