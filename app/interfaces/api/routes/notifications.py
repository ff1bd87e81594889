"""Endpoints for reading and acknowledging notifications."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    count_unread_notifications,
    create_notification,
    delete_notification,
    get_notification,
    list_notifications,
    mark_all_notifications_as_read,
    mark_notification_as_read,
)
from app.domain.entities import NotificationCategory, User
from app.domain.pagination import PageRequest
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationPublisher
from app.interfaces.api.dependencies import (
    get_current_active_user,
    get_notification_publisher,
    require_admin,
)
from app.interfaces.api.routes_helpers import page_request, raise_http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    CountRead,
    NotificationCreate,
    NotificationRead,
    PaginationMeta,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=ApiResponse[list[NotificationRead]])
def list_my_notifications(
    category: NotificationCategory | None = None,
    read: bool | None = Query(None, description="Only read (true) or unread (false) items"),
    search: str | None = Query(None, max_length=100),
    pagination: PageRequest = Depends(page_request),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Return the caller's notifications, newest first."""

    page = list_notifications(
        db,
        user_id=current_user.id,
        page_request=pagination,
        category=category,
        is_read=read,
        search=search,
    )
    return ApiResponse(
        data=[NotificationRead.model_validate(item) for item in page.items],
        meta=PaginationMeta.from_page(page),
    )


@router.get("/unread/count", response_model=ApiResponse[CountRead])
def unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    count = count_unread_notifications(db, user_id=current_user.id)
    return ApiResponse(data=CountRead(count=count))


@router.put("/read-all", response_model=ApiResponse[CountRead])
def mark_all_as_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    count = mark_all_notifications_as_read(db, user_id=current_user.id)
    return ApiResponse(data=CountRead(count=count), message=f"{count} notification(s) marked as read")


@router.post(
    "",
    response_model=ApiResponse[NotificationRead],
    status_code=status.HTTP_201_CREATED,
)
def create_for_user(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
    _: User = Depends(require_admin),
):
    """Store a notification for any member and push it if they are online."""

    try:
        notification = create_notification(
            db,
            publisher,
            user_id=payload.user_id,
            category=payload.category,
            title=payload.title,
            body=payload.body,
            data=payload.data,
            action_url=payload.action_url,
        )
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=NotificationRead.model_validate(notification))


@router.get("/{notification_id}", response_model=ApiResponse[NotificationRead])
def read_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        notification = get_notification(db, notification_id, user_id=current_user.id)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=NotificationRead.model_validate(notification))


@router.put("/{notification_id}/read", response_model=ApiResponse[NotificationRead])
def mark_as_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        notification = mark_notification_as_read(db, notification_id, user_id=current_user.id)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=NotificationRead.model_validate(notification))


@router.delete("/{notification_id}", response_model=ApiResponse[None])
def remove_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        delete_notification(db, notification_id, user_id=current_user.id)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(message="Notification deleted")
