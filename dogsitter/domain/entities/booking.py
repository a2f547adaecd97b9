"""Domain entities describing walking and boarding bookings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BOOKING_STATUS_PENDING = "pending"
BOOKING_STATUS_CONFIRMED = "confirmed"

_TABLE_SUFFIX = "_bookings"


class BookingType(str, Enum):
    """Service booked by an owner.

    Each type is stored in its own table, so this enum is the single place
    where table names and service labels are derived.
    """

    WALKING = "walking"
    BOARDING = "boarding"

    @property
    def table_name(self) -> str:
        return f"{self.value}{_TABLE_SUFFIX}"

    @property
    def service_label(self) -> str:
        """Wording used when describing the service to a sitter."""

        if self is BookingType.WALKING:
            return "walk"
        return "boarding"

    @classmethod
    def from_table(cls, table: str) -> "BookingType | None":
        for booking_type in cls:
            if booking_type.table_name == table:
                return booking_type
        return None


@dataclass
class Booking:
    """Snapshot of a booking row as observed in a change event."""

    id: str
    owner_id: str
    sitter_id: str
    status: str
    booking_type: BookingType


@dataclass
class BookingSnapshot:
    """Subset of the previous booking row needed to detect transitions."""

    status: str
    id: str | None = None


__all__ = [
    "BOOKING_STATUS_CONFIRMED",
    "BOOKING_STATUS_PENDING",
    "Booking",
    "BookingSnapshot",
    "BookingType",
]
