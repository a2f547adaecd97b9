"""Persistence helpers for walking and boarding bookings."""

from __future__ import annotations

from sqlalchemy.orm import Session

from dogsitter.domain.entities import BookingType
from dogsitter.infrastructure.models import BOOKING_MODELS


class BookingRepository:
    """Record payment results on walking and boarding bookings."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def record_payment(
        self,
        booking_type: BookingType,
        booking_id: str,
        *,
        payment_intent_id: str,
        status: str,
    ) -> bool:
        """Store the payment reference and new status.

        Returns ``False`` when no booking row matched ``booking_id``.
        """

        model_class = BOOKING_MODELS[booking_type]
        updated = (
            self.session.query(model_class)
            .filter(model_class.id == booking_id)
            .update(
                {
                    model_class.payment_intent_id: payment_intent_id,
                    model_class.status: status,
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return bool(updated)


__all__ = ["BookingRepository"]
