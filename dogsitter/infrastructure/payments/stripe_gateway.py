"""Minimal Stripe REST client used by the payment functions."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx

from dogsitter.domain.entities import PaymentIntent, PaymentMethod
from dogsitter.domain.errors import PaymentError

logger = logging.getLogger(__name__)

STRIPE_API_VERSION = "2023-10-16"


def _extract_stripe_error_details(body: Any) -> str | None:
    """Return a human readable description for a Stripe error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        error = parsed.get("error")
        if isinstance(error, dict):
            message = error.get("message")
            code = error.get("code") or error.get("decline_code")
            if message and code:
                return f"{message} ({code})"
            if message:
                return str(message)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    return None


def _flatten_form(data: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    """Encode nested mappings the way Stripe expects (``a[b]=c``)."""

    flattened: dict[str, str] = {}
    for key, value in data.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if value is None:
            continue
        if isinstance(value, Mapping):
            flattened.update(_flatten_form(value, name))
        elif isinstance(value, bool):
            flattened[name] = "true" if value else "false"
        else:
            flattened[name] = str(value)
    return flattened


class StripeGateway:
    """Call the subset of the Stripe API the booking payments need."""

    def __init__(
        self,
        secret_key: str | None,
        *,
        api_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._secret_key = secret_key
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        form: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        if not self._secret_key:
            raise PaymentError("Stripe is not configured")

        headers = {
            "Authorization": f"Bearer {self._secret_key}",
            "Stripe-Version": STRIPE_API_VERSION,
        }
        try:
            async with httpx.AsyncClient(
                base_url=self._api_url, timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.request(
                    method,
                    path,
                    params=_flatten_form(params) if params else None,
                    data=_flatten_form(form) if form else None,
                    headers=headers,
                )
        except httpx.HTTPError as exc:
            logger.error("Stripe request %s %s failed: %s", method, path, exc)
            raise PaymentError(f"Payment processor unavailable: {exc}") from exc

        if not 200 <= response.status_code < 300:
            details = _extract_stripe_error_details(response.content)
            if details:
                logger.error(
                    "Stripe API responded with status %s: %s", response.status_code, details
                )
            else:
                logger.error("Stripe API responded with status %s", response.status_code)
            raise PaymentError(details or f"Payment processor error ({response.status_code})")

        return response.json()

    async def list_card_payment_methods(
        self, customer_id: str, *, limit: int | None = None
    ) -> list[PaymentMethod]:
        """Return the cards saved for ``customer_id``, newest first."""

        params: dict[str, Any] = {"customer": customer_id, "type": "card"}
        if limit is not None:
            params["limit"] = limit
        payload = await self._request("GET", "/payment_methods", params=params)

        methods: list[PaymentMethod] = []
        for item in payload.get("data") or []:
            card = item.get("card")
            if item.get("type") != "card" or not isinstance(card, dict):
                continue
            methods.append(
                PaymentMethod(
                    id=item["id"],
                    brand=card.get("brand"),
                    last4=card.get("last4"),
                    exp_month=card.get("exp_month"),
                    exp_year=card.get("exp_year"),
                )
            )
        return methods

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
    ) -> PaymentIntent:
        """Create and immediately confirm an off-session destination charge."""

        form = {
            "amount": amount,
            "currency": currency,
            "customer": customer_id,
            "payment_method": payment_method_id,
            "off_session": True,
            "confirm": True,
            "application_fee_amount": application_fee_amount,
            "transfer_data": {"destination": destination_account_id},
            "metadata": dict(metadata or {}),
        }
        payload = await self._request("POST", "/payment_intents", form=form)
        return PaymentIntent(
            id=payload["id"],
            status=payload.get("status", ""),
            amount=int(payload.get("amount", amount)),
            application_fee_amount=payload.get("application_fee_amount"),
        )


__all__ = ["STRIPE_API_VERSION", "StripeGateway"]
