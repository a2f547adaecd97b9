"""Endpoints charging bookings and listing saved payment methods."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response

from dogsitter.application.use_cases.payments import (
    PaymentGateway,
    charge_booking,
    list_saved_cards,
)
from dogsitter.config import Settings, get_settings
from dogsitter.domain.errors import PaymentError
from dogsitter.infrastructure.database import SessionFactory
from dogsitter.interfaces.api.dependencies import get_payment_gateway, get_session_factory
from dogsitter.interfaces.api.routes_helpers import (
    error_response,
    json_response,
    preflight_response,
    read_json_body,
)
from dogsitter.interfaces.api.schemas import (
    ChargePaymentRequest,
    ChargePaymentResponse,
    PaymentMethodRead,
    PaymentMethodsRequest,
    PaymentMethodsResponse,
)

router = APIRouter(tags=["payments"])
logger = logging.getLogger(__name__)


@router.options("/charge-payment", include_in_schema=False)
@router.options("/get-payment-methods", include_in_schema=False)
def payments_preflight() -> Response:
    return preflight_response()


@router.post("/charge-payment")
async def charge_payment(
    request: Request,
    session_factory: SessionFactory = Depends(get_session_factory),
    gateway: PaymentGateway = Depends(get_payment_gateway),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Charge the customer's saved card and mark the booking confirmed."""

    try:
        charge_in = ChargePaymentRequest.model_validate(await read_json_body(request))
    except ValueError as exc:
        return error_response(str(exc), status.HTTP_400_BAD_REQUEST)

    try:
        result = await charge_booking(
            session_factory,
            gateway,
            charge_in.to_domain(),
            fee_percentage=settings.platform_fee_percentage,
            currency=settings.payment_currency,
            timeout=settings.remote_call_timeout_seconds,
        )
    except PaymentError as exc:
        logger.error("Error in charge-payment for booking %s: %s", charge_in.booking_id, exc)
        return error_response(str(exc), status.HTTP_400_BAD_REQUEST)

    response = ChargePaymentResponse(payment_intent_id=result.payment_intent.id)
    return json_response(response.model_dump(by_alias=True))


@router.post("/get-payment-methods")
async def get_payment_methods(
    request: Request,
    session_factory: SessionFactory = Depends(get_session_factory),
    gateway: PaymentGateway = Depends(get_payment_gateway),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Return the cards the owner saved for future bookings."""

    try:
        methods_in = PaymentMethodsRequest.model_validate(await read_json_body(request))
    except ValueError as exc:
        return error_response(str(exc), status.HTTP_400_BAD_REQUEST)

    try:
        methods = await list_saved_cards(
            session_factory,
            gateway,
            methods_in.owner_id,
            timeout=settings.remote_call_timeout_seconds,
        )
    except PaymentError as exc:
        logger.error("Error listing payment methods for %s: %s", methods_in.owner_id, exc)
        return error_response(str(exc) or "An unknown error occurred", status.HTTP_400_BAD_REQUEST)

    response = PaymentMethodsResponse(
        payment_methods=[
            PaymentMethodRead(
                id=method.id,
                brand=method.brand,
                last4=method.last4,
                exp_month=method.exp_month,
                exp_year=method.exp_year,
            )
            for method in methods
        ]
    )
    return json_response(response.model_dump(by_alias=True))
