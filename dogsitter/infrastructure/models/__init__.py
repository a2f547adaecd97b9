"""ORM models used by the application infrastructure."""

from .profile import ProfileModel
from .message_thread import MessageThreadModel
from .booking import BOOKING_MODELS, BoardingBookingModel, WalkingBookingModel
from .notification import NotificationModel

__all__ = [
    "BOOKING_MODELS",
    "BoardingBookingModel",
    "MessageThreadModel",
    "NotificationModel",
    "ProfileModel",
    "WalkingBookingModel",
]
