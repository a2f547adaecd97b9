"""Domain entities returned by the payment processor."""

from __future__ import annotations

from dataclasses import dataclass

from .booking import BookingType


@dataclass
class PaymentMethod:
    """Saved card of a customer."""

    id: str
    brand: str | None
    last4: str | None
    exp_month: int | None
    exp_year: int | None


@dataclass
class PaymentIntent:
    id: str
    status: str
    amount: int
    application_fee_amount: int | None = None


@dataclass
class ChargeRequest:
    """Charge a customer's saved card for a booking."""

    customer_id: str
    total_price: float
    sitter_id: str
    booking_id: str
    booking_type: BookingType = BookingType.WALKING


__all__ = ["ChargeRequest", "PaymentIntent", "PaymentMethod"]
