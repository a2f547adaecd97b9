"""Use case listing the cards an owner saved with the payment processor."""

from __future__ import annotations

import logging

import anyio
from sqlalchemy.exc import SQLAlchemyError

from dogsitter.domain.entities import PaymentMethod
from dogsitter.domain.errors import PaymentError
from dogsitter.infrastructure.database import SessionFactory, run_in_session
from dogsitter.infrastructure.repositories import ProfileRepository

from .gateway import PaymentGateway

logger = logging.getLogger(__name__)


async def list_saved_cards(
    session_factory: SessionFactory,
    gateway: PaymentGateway,
    owner_id: str,
    *,
    timeout: float,
) -> list[PaymentMethod]:
    """Return the owner's saved cards; owners without a customer have none."""

    try:
        profile = await run_in_session(
            session_factory,
            lambda session: ProfileRepository(session).get(owner_id),
            timeout=timeout,
        )
    except (SQLAlchemyError, TimeoutError) as exc:
        logger.error("Error fetching owner profile %s: %s", owner_id, exc)
        raise PaymentError("Could not load owner profile") from exc

    if profile is None or not profile.stripe_customer_id:
        return []

    try:
        with anyio.fail_after(timeout):
            return await gateway.list_card_payment_methods(profile.stripe_customer_id)
    except TimeoutError as exc:
        raise PaymentError("Payment processor timed out") from exc


__all__ = ["list_saved_cards"]
