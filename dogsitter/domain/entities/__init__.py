"""Domain entities exposed by the application."""

from .booking import (
    BOOKING_STATUS_CONFIRMED,
    BOOKING_STATUS_PENDING,
    Booking,
    BookingSnapshot,
    BookingType,
)
from .change_event import (
    OPERATION_DELETE,
    OPERATION_INSERT,
    OPERATION_UPDATE,
    ChangeEvent,
    EventKind,
    EventRecord,
)
from .message import Message, MessageThread
from .notification import (
    Notification,
    NotificationDraft,
    NotificationType,
    NotificationWriteResult,
    PushDelivered,
    PushFailed,
    PushMessage,
    PushOutcome,
    PushSkipped,
)
from .payment import ChargeRequest, PaymentIntent, PaymentMethod
from .profile import Profile
from .review import Review

__all__ = [
    "BOOKING_STATUS_CONFIRMED",
    "BOOKING_STATUS_PENDING",
    "Booking",
    "BookingSnapshot",
    "BookingType",
    "ChangeEvent",
    "ChargeRequest",
    "EventKind",
    "EventRecord",
    "Message",
    "MessageThread",
    "Notification",
    "NotificationDraft",
    "NotificationType",
    "NotificationWriteResult",
    "OPERATION_DELETE",
    "OPERATION_INSERT",
    "OPERATION_UPDATE",
    "PaymentIntent",
    "PaymentMethod",
    "Profile",
    "PushDelivered",
    "PushFailed",
    "PushMessage",
    "PushOutcome",
    "PushSkipped",
    "Review",
]
