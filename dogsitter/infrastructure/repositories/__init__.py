"""Repository implementations for infrastructure layer."""

from .booking_repository import BookingRepository
from .message_thread_repository import MessageThreadRepository
from .notification_repository import NotificationRepository
from .profile_repository import ProfileRepository

__all__ = [
    "BookingRepository",
    "MessageThreadRepository",
    "NotificationRepository",
    "ProfileRepository",
]
