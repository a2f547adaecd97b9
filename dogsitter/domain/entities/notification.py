"""Domain entities representing user notifications and their delivery."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Union


class NotificationType(str, Enum):
    """Kinds of in-app notification the client knows how to render."""

    MESSAGE = "message"
    BOOKING_REQUEST = "booking_request"
    BOOKING_STATUS = "booking_status"
    REVIEW = "review"


@dataclass
class NotificationDraft:
    """Content of a notification that has not been persisted yet."""

    recipient_id: str
    type: NotificationType
    title: str
    body: str
    data: dict[str, Any] = field(default_factory=dict)


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: str | None
    recipient_id: str
    type: NotificationType
    title: str
    body: str
    data: dict[str, Any] = field(default_factory=dict)
    is_read: bool = False
    created_at: datetime | None = None


@dataclass(frozen=True)
class PushDelivered:
    """The push endpoint accepted the message."""


@dataclass(frozen=True)
class PushSkipped:
    """No push was attempted."""

    reason: str


@dataclass(frozen=True)
class PushFailed:
    """The push call raised or was rejected; the record still exists."""

    reason: str


PushOutcome = Union[PushDelivered, PushSkipped, PushFailed]


@dataclass(frozen=True)
class NotificationWriteResult:
    """Outcome of writing a notification: the stored record and the push result."""

    record: Notification
    push: PushOutcome


@dataclass
class PushMessage:
    """Message accepted by the Expo push endpoint."""

    to: str
    title: str
    body: str
    data: dict[str, Any] = field(default_factory=dict)
    sound: str = "default"
    priority: str = "high"

    def to_payload(self) -> dict[str, Any]:
        return {
            "to": self.to,
            "title": self.title,
            "body": self.body,
            "data": self.data,
            "sound": self.sound,
            "priority": self.priority,
        }


__all__ = [
    "Notification",
    "NotificationDraft",
    "NotificationType",
    "NotificationWriteResult",
    "PushDelivered",
    "PushFailed",
    "PushMessage",
    "PushOutcome",
    "PushSkipped",
]
