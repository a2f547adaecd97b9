"""Decide whether a booking change deserves a notification."""

from __future__ import annotations

from enum import Enum

from dogsitter.domain.entities import Booking, BookingSnapshot


class BookingTransition(str, Enum):
    CREATED = "created"
    STATUS_CHANGED = "status_changed"
    UNCHANGED = "unchanged"


def diff_booking(current: Booking, previous: BookingSnapshot | None) -> BookingTransition:
    """Compare the new booking row with the previous one.

    A missing previous row means the booking was just created. Only a
    status change counts as a transition for existing bookings.
    """

    if previous is None:
        return BookingTransition.CREATED
    if current.status != previous.status:
        return BookingTransition.STATUS_CHANGED
    return BookingTransition.UNCHANGED


__all__ = ["BookingTransition", "diff_booking"]
