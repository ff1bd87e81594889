"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import NotificationCategory


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    category: NotificationCategory
    title: str
    body: str
    data: dict[str, Any] | None = None
    action_url: str | None = None
    is_read: bool
    created_at: datetime
    read_at: datetime | None = None


class NotificationCreate(BaseModel):
    """Notification raised by an administrator for a given member."""

    user_id: int = Field(..., ge=1)
    category: NotificationCategory = NotificationCategory.SYSTEM
    title: str = Field(..., min_length=1, max_length=200)
    body: str = Field(..., min_length=1, max_length=2000)
    data: dict[str, Any] | None = None
    action_url: str | None = Field(default=None, max_length=500)


__all__ = ["NotificationCreate", "NotificationRead"]
