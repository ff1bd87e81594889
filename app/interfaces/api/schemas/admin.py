"""Schemas for administrative endpoints."""

from pydantic import BaseModel, Field


class BroadcastRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    body: str = Field(..., min_length=1, max_length=2000)
    action_url: str | None = Field(default=None, max_length=500)
    persist: bool = Field(
        default=True,
        description="Store a SYSTEM notification for every active member in addition to the live push",
    )


class BroadcastResult(BaseModel):
    delivered: int
    stored: int


class RealtimeStatsRead(BaseModel):
    enabled: bool
    connected_clients: int
    user_ids: list[int]


class PurgeRequest(BaseModel):
    max_age_days: int | None = Field(default=None, ge=0)


__all__ = ["BroadcastRequest", "BroadcastResult", "PurgeRequest", "RealtimeStatsRead"]
