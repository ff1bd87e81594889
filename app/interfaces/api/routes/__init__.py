from fastapi import FastAPI

from .admin import router as admin_router
from .auth import router as auth_router
from .events import router as events_router
from .messages import router as messages_router
from .notifications import router as notifications_router
from .opportunities import router as opportunities_router
from .realtime import build_realtime_router
from .resources import router as resources_router
from .users import router as users_router


def register_routes(app: FastAPI, *, api_prefix: str, websocket_path: str) -> None:
    """Register every API router plus the notification websocket."""

    app.include_router(auth_router, prefix=api_prefix)
    app.include_router(users_router, prefix=api_prefix)
    app.include_router(notifications_router, prefix=api_prefix)
    app.include_router(messages_router, prefix=api_prefix)
    app.include_router(opportunities_router, prefix=api_prefix)
    app.include_router(events_router, prefix=api_prefix)
    app.include_router(resources_router, prefix=api_prefix)
    app.include_router(admin_router, prefix=api_prefix)
    app.include_router(build_realtime_router(websocket_path))
