"""Direct messaging endpoints."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.messages import (
    MessageBox,
    count_unread_messages,
    delete_message,
    get_message,
    list_conversations,
    list_messages,
    mark_message_as_read,
    send_message,
)
from app.domain.entities import User
from app.domain.pagination import PageRequest
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationPublisher
from app.interfaces.api.dependencies import get_current_active_user, get_notification_publisher
from app.interfaces.api.routes_helpers import page_request, raise_http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    ConversationRead,
    CountRead,
    MessageCreate,
    MessageRead,
    PaginationMeta,
    UserSummaryRead,
)

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("", response_model=ApiResponse[MessageRead], status_code=status.HTTP_201_CREATED)
def send(
    payload: MessageCreate,
    db: Session = Depends(get_db),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
    current_user: User = Depends(get_current_active_user),
):
    """Send a message; the recipient gets a MESSAGE notification."""

    try:
        message = send_message(
            db,
            publisher,
            sender=current_user,
            recipient_id=payload.recipient_id,
            subject=payload.subject,
            content=payload.content,
        )
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=MessageRead.model_validate(message), message="Message sent")


@router.get("", response_model=ApiResponse[list[MessageRead]])
def list_my_messages(
    box: MessageBox = MessageBox.RECEIVED,
    search: str | None = Query(None, max_length=100),
    pagination: PageRequest = Depends(page_request),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    page = list_messages(
        db, user_id=current_user.id, page_request=pagination, box=box, search=search
    )
    return ApiResponse(
        data=[MessageRead.model_validate(item) for item in page.items],
        meta=PaginationMeta.from_page(page),
    )


@router.get("/unread/count", response_model=ApiResponse[CountRead])
def unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    return ApiResponse(data=CountRead(count=count_unread_messages(db, user_id=current_user.id)))


@router.get("/conversations", response_model=ApiResponse[list[ConversationRead]])
def conversations(
    pagination: PageRequest = Depends(page_request),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """List the members the current user exchanged messages with, latest first."""

    page, counterparts = list_conversations(db, user_id=current_user.id, page_request=pagination)
    data = []
    for conversation in page.items:
        other = counterparts.get(conversation.other_user_id)
        data.append(
            ConversationRead(
                other_user_id=conversation.other_user_id,
                other_user=UserSummaryRead.model_validate(other) if other else None,
                last_message=MessageRead.model_validate(conversation.last_message),
                unread_count=conversation.unread_count,
                total_messages=conversation.total_messages,
            )
        )
    return ApiResponse(data=data, meta=PaginationMeta.from_page(page))


@router.get("/{message_id}", response_model=ApiResponse[MessageRead])
def read_message(
    message_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        message = get_message(db, message_id, user_id=current_user.id)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=MessageRead.model_validate(message))


@router.put("/{message_id}/read", response_model=ApiResponse[MessageRead])
def mark_as_read(
    message_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        message = mark_message_as_read(db, message_id, user_id=current_user.id)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=MessageRead.model_validate(message))


@router.delete("/{message_id}", response_model=ApiResponse[None])
def remove_message(
    message_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        delete_message(db, message_id, user_id=current_user.id)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(message="Message deleted")
