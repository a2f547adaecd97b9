"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: str
    recipient_id: str
    type: str
    title: str
    body: str
    data: dict[str, Any] = Field(default_factory=dict)
    is_read: bool = False
    created_at: datetime | None = None


class NotificationInbox(BaseModel):
    """Newest-first notifications of a recipient and how many are unread."""

    model_config = ConfigDict(populate_by_name=True)

    notifications: list[NotificationRead]
    unread_count: int = Field(..., alias="unreadCount")


__all__ = ["NotificationInbox", "NotificationRead"]
