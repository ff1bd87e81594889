"""Administrative endpoints for announcements and realtime maintenance."""

import logging

from anyio import from_thread
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    purge_read_notifications,
    store_system_announcement,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.notifications import RealtimeGateway
from app.interfaces.api.dependencies import get_realtime_gateway, require_admin
from app.interfaces.api.routes_helpers import raise_http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    BroadcastRequest,
    BroadcastResult,
    CountRead,
    PurgeRequest,
    RealtimeStatsRead,
)
from app.utils import utc_now

router = APIRouter(prefix="/admin", tags=["admin"])
logger = logging.getLogger(__name__)


@router.post("/broadcast", response_model=ApiResponse[BroadcastResult])
def broadcast(
    payload: BroadcastRequest,
    db: Session = Depends(get_db),
    gateway: RealtimeGateway | None = Depends(get_realtime_gateway),
    current_user: User = Depends(require_admin),
):
    """Send an announcement to every connected member.

    With ``persist`` the announcement is also stored as a SYSTEM notification
    so offline members find it later.
    """

    stored = 0
    if payload.persist:
        stored = store_system_announcement(
            db, title=payload.title, body=payload.body, action_url=payload.action_url
        )

    delivered = 0
    if gateway is not None:
        frame = {
            "type": "broadcast",
            "data": payload.model_dump(exclude={"persist"}),
            "timestamp": utc_now().isoformat(),
        }
        delivered = from_thread.run(gateway.broadcast, frame)
    logger.info(
        "Admin %s broadcast reached %s client(s), %s stored", current_user.id, delivered, stored
    )
    return ApiResponse(data=BroadcastResult(delivered=delivered, stored=stored))


@router.get("/realtime/stats", response_model=ApiResponse[RealtimeStatsRead])
def realtime_stats(
    gateway: RealtimeGateway | None = Depends(get_realtime_gateway),
    _: User = Depends(require_admin),
):
    if gateway is None:
        return ApiResponse(data=RealtimeStatsRead(enabled=False, connected_clients=0, user_ids=[]))
    return ApiResponse(data=RealtimeStatsRead(enabled=True, **gateway.stats()))


@router.post("/notifications/purge", response_model=ApiResponse[CountRead])
def purge_notifications(
    payload: PurgeRequest,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Delete read notifications older than the retention period."""

    try:
        deleted = purge_read_notifications(db, max_age_days=payload.max_age_days)
    except ValueError as exc:
        raise_http_error(exc)
    return ApiResponse(data=CountRead(count=deleted), message=f"{deleted} notification(s) purged")
