"""Interface the payment use cases expect from the processor client."""

from __future__ import annotations

from typing import Mapping, Protocol

from dogsitter.domain.entities import PaymentIntent, PaymentMethod


class PaymentGateway(Protocol):
    async def list_card_payment_methods(
        self, customer_id: str, *, limit: int | None = None
    ) -> list[PaymentMethod]: ...

    async def create_payment_intent(
        self,
        *,
        amount: int,
        currency: str,
        customer_id: str,
        payment_method_id: str,
        application_fee_amount: int,
        destination_account_id: str,
        metadata: Mapping[str, str] | None = None,
    ) -> PaymentIntent: ...


__all__ = ["PaymentGateway"]
