"""Aggregate application use cases."""

from .notifications import EventRouter, build_event_router
from .payments import charge_booking, list_saved_cards

__all__ = [
    "EventRouter",
    "build_event_router",
    "charge_booking",
    "list_saved_cards",
]
