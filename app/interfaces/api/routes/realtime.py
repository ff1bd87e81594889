"""Websocket endpoint streaming notifications to connected members."""

from fastapi import APIRouter, WebSocket, status


def build_realtime_router(path: str) -> APIRouter:
    """Return a router serving the notification websocket at ``path``."""

    router = APIRouter(tags=["realtime"])

    @router.websocket(path)
    async def notifications_websocket(websocket: WebSocket) -> None:
        gateway = websocket.app.state.realtime_gateway
        if gateway is None:
            await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
            return
        await gateway.serve(websocket)

    return router
