"""Domain entities describing row change events emitted by the database."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .booking import Booking, BookingSnapshot, BookingType
from .message import Message
from .review import Review

OPERATION_INSERT = "INSERT"
OPERATION_UPDATE = "UPDATE"
OPERATION_DELETE = "DELETE"


class EventKind(str, Enum):
    """Source tables whose changes produce notifications."""

    MESSAGES = "messages"
    WALKING_BOOKINGS = "walking_bookings"
    BOARDING_BOOKINGS = "boarding_bookings"
    REVIEWS = "reviews"

    @classmethod
    def from_table(cls, table: str) -> "EventKind | None":
        try:
            return cls(table)
        except ValueError:
            return None

    @property
    def booking_type(self) -> BookingType | None:
        return BookingType.from_table(self.value)


EventRecord = Union[Message, Booking, Review]


@dataclass(frozen=True)
class ChangeEvent:
    """A validated change event.

    ``kind`` is ``None`` when the table is not one this service handles; in
    that case ``record`` is not parsed either.
    """

    table: str
    operation: str
    kind: EventKind | None
    record: EventRecord | None = None
    previous: BookingSnapshot | None = None


__all__ = [
    "ChangeEvent",
    "EventKind",
    "EventRecord",
    "OPERATION_DELETE",
    "OPERATION_INSERT",
    "OPERATION_UPDATE",
]
