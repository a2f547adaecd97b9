"""Pydantic models for the payment function payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dogsitter.domain.entities import BookingType, ChargeRequest


class ChargePaymentRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    customer_id: str = Field(..., min_length=1)
    total_price: float = Field(..., gt=0, allow_inf_nan=False)
    sitter_id: str = Field(..., min_length=1)
    booking_id: str = Field(..., min_length=1)
    booking_type: BookingType = BookingType.WALKING

    @field_validator("booking_type", mode="before")
    @classmethod
    def _default_booking_type(cls, value: object) -> object:
        # Older clients omit the type; those bookings are walking bookings.
        return value or BookingType.WALKING

    def to_domain(self) -> ChargeRequest:
        return ChargeRequest(
            customer_id=self.customer_id,
            total_price=self.total_price,
            sitter_id=self.sitter_id,
            booking_id=self.booking_id,
            booking_type=self.booking_type,
        )


class ChargePaymentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    payment_intent_id: str = Field(..., alias="paymentIntentId")


class PaymentMethodsRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    owner_id: str = Field(..., min_length=1)


class PaymentMethodRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    brand: str | None = None
    last4: str | None = None
    exp_month: int | None = Field(default=None, alias="expMonth")
    exp_year: int | None = Field(default=None, alias="expYear")


class PaymentMethodsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    payment_methods: list[PaymentMethodRead] = Field(
        default_factory=list, alias="paymentMethods"
    )


__all__ = [
    "ChargePaymentRequest",
    "ChargePaymentResponse",
    "PaymentMethodRead",
    "PaymentMethodsRequest",
    "PaymentMethodsResponse",
]
