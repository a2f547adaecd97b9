"""Use cases for charging bookings and listing saved cards."""

from .charge_payment import (
    ChargeResult,
    charge_booking,
    compute_platform_fee,
    to_minor_units,
)
from .gateway import PaymentGateway
from .list_payment_methods import list_saved_cards

__all__ = [
    "ChargeResult",
    "PaymentGateway",
    "charge_booking",
    "compute_platform_fee",
    "list_saved_cards",
    "to_minor_units",
]
