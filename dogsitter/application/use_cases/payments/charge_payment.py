"""Use case charging a customer's saved card for a confirmed booking."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

import anyio
from sqlalchemy.exc import SQLAlchemyError

from dogsitter.domain.entities import (
    BOOKING_STATUS_CONFIRMED,
    ChargeRequest,
    PaymentIntent,
    Profile,
)
from dogsitter.domain.errors import PaymentError
from dogsitter.infrastructure.database import SessionFactory, run_in_session
from dogsitter.infrastructure.repositories import BookingRepository, ProfileRepository

from .gateway import PaymentGateway

logger = logging.getLogger(__name__)

_WHOLE = Decimal("1")


def to_minor_units(amount: float | Decimal | str) -> int:
    """Convert a price in major units (dollars) to cents, rounding half up.

    Raises :class:`PaymentError` for amounts that are not finite numbers.
    """

    try:
        return int((Decimal(str(amount)) * 100).quantize(_WHOLE, rounding=ROUND_HALF_UP))
    except (InvalidOperation, ValueError, OverflowError) as exc:
        raise PaymentError(f"Invalid total price: {amount}") from exc


def compute_platform_fee(amount_minor: int, percentage: float) -> int:
    """Return the platform share of ``amount_minor``, rounded to whole cents."""

    fee = Decimal(amount_minor) * Decimal(str(percentage))
    return int(fee.quantize(_WHOLE, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class ChargeResult:
    payment_intent: PaymentIntent
    amount: int
    platform_fee: int
    booking_updated: bool


async def _load_sitter(
    session_factory: SessionFactory, sitter_id: str, *, timeout: float
) -> Profile | None:
    try:
        return await run_in_session(
            session_factory,
            lambda session: ProfileRepository(session).get(sitter_id),
            timeout=timeout,
        )
    except (SQLAlchemyError, TimeoutError) as exc:
        logger.error("Error fetching sitter profile %s: %s", sitter_id, exc)
        raise PaymentError("Could not load sitter profile") from exc


async def charge_booking(
    session_factory: SessionFactory,
    gateway: PaymentGateway,
    request: ChargeRequest,
    *,
    fee_percentage: float,
    currency: str,
    timeout: float,
) -> ChargeResult:
    """Charge ``request.customer_id`` and route the payout to the sitter.

    Fails closed with :class:`PaymentError` when the sitter has no connected
    account or the customer has no saved card. Once the charge succeeds the
    booking is marked confirmed; a failure to update the row is logged but
    does not undo or hide the charge.
    """

    sitter = await _load_sitter(session_factory, request.sitter_id, timeout=timeout)
    if sitter is None or not sitter.stripe_account_id:
        logger.error("Sitter %s has no Stripe account", request.sitter_id)
        raise PaymentError("Sitter Stripe account not found")

    try:
        with anyio.fail_after(timeout):
            methods = await gateway.list_card_payment_methods(request.customer_id, limit=1)
    except TimeoutError as exc:
        raise PaymentError("Payment processor timed out") from exc
    if not methods:
        logger.error("Customer %s has no saved payment method", request.customer_id)
        raise PaymentError("No payment method found")

    amount = to_minor_units(request.total_price)
    if amount <= 0:
        raise PaymentError("Total price must be greater than zero")
    platform_fee = compute_platform_fee(amount, fee_percentage)

    try:
        with anyio.fail_after(timeout):
            intent = await gateway.create_payment_intent(
                amount=amount,
                currency=currency,
                customer_id=request.customer_id,
                payment_method_id=methods[0].id,
                application_fee_amount=platform_fee,
                destination_account_id=sitter.stripe_account_id,
                metadata={"booking_id": request.booking_id, "sitter_id": request.sitter_id},
            )
    except TimeoutError as exc:
        raise PaymentError("Payment processor timed out") from exc

    logger.info(
        "Charged %s %s for %s booking %s (fee %s, intent %s)",
        amount,
        currency,
        request.booking_type.value,
        request.booking_id,
        platform_fee,
        intent.id,
    )

    booking_updated = False
    try:
        booking_updated = await run_in_session(
            session_factory,
            lambda session: BookingRepository(session).record_payment(
                request.booking_type,
                request.booking_id,
                payment_intent_id=intent.id,
                status=BOOKING_STATUS_CONFIRMED,
            ),
            timeout=timeout,
        )
    except (SQLAlchemyError, TimeoutError) as exc:
        logger.error(
            "Payment %s succeeded but booking %s could not be updated: %s",
            intent.id,
            request.booking_id,
            exc,
        )
    else:
        if not booking_updated:
            logger.warning(
                "Payment %s succeeded but %s booking %s does not exist",
                intent.id,
                request.booking_type.value,
                request.booking_id,
            )

    return ChargeResult(
        payment_intent=intent,
        amount=amount,
        platform_fee=platform_fee,
        booking_updated=booking_updated,
    )


__all__ = ["ChargeResult", "charge_booking", "compute_platform_fee", "to_minor_units"]
