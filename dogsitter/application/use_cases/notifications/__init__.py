"""Public helpers for turning database changes into user notifications."""

from .booking_diff import BookingTransition, diff_booking
from .handlers import (
    NotificationServices,
    notify_booking_change,
    notify_new_message,
    notify_new_review,
)
from .lookups import ProfileLookup, ThreadResolver
from .router import DispatchResult, EventRouter, build_event_router
from .writer import NotificationWriter, PushSender

__all__ = [
    "BookingTransition",
    "DispatchResult",
    "EventRouter",
    "NotificationServices",
    "NotificationWriter",
    "ProfileLookup",
    "PushSender",
    "ThreadResolver",
    "build_event_router",
    "diff_booking",
    "notify_booking_change",
    "notify_new_message",
    "notify_new_review",
]
