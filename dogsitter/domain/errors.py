"""Exceptions raised by the notification and payment functions."""

from __future__ import annotations


class DogSitterError(Exception):
    """Base class for every error raised intentionally by this package."""


class MalformedEventError(DogSitterError):
    """A change event could not be validated and was rejected before dispatch."""


class NotificationWriteError(DogSitterError):
    """Persisting a notification record failed, so no push was attempted."""


class PaymentError(DogSitterError):
    """A payment could not be completed or its prerequisites are missing."""


__all__ = [
    "DogSitterError",
    "MalformedEventError",
    "NotificationWriteError",
    "PaymentError",
]
