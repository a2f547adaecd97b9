"""HTTP behaviour of the payment endpoints."""

from __future__ import annotations

import pytest
from fastapi import status

from dogsitter.domain.entities import BookingType
from dogsitter.domain.errors import PaymentError


def _charge_payload(**overrides) -> dict:
    payload = {
        "customer_id": "cus_owner",
        "total_price": 42.0,
        "sitter_id": "u2",
        "booking_id": "b7",
        "booking_type": "boarding",
    }
    payload.update(overrides)
    return payload


def test_payment_preflight(client) -> None:
    for path in ("/charge-payment", "/get-payment-methods"):
        response = client.options(path)
        assert response.status_code == status.HTTP_200_OK
        assert response.text == "ok"
        assert response.headers["access-control-allow-origin"] == "*"


def test_charge_payment_confirms_booking(client, customers, gateway) -> None:
    customers.booking(BookingType.BOARDING, "b7", "u1", "u2")
    gateway.add_card("cus_owner")

    response = client.post("/charge-payment", json=_charge_payload())

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"paymentIntentId": "pi_1"}
    assert gateway.intents[0]["amount"] == 4200
    assert gateway.intents[0]["application_fee_amount"] == 420
    assert gateway.intents[0]["currency"] == "usd"
    row = customers.booking_row(BookingType.BOARDING, "b7")
    assert row.status == "confirmed"
    assert row.payment_intent_id == "pi_1"


def test_missing_booking_type_defaults_to_walking(client, customers, gateway) -> None:
    customers.booking(BookingType.WALKING, "b7", "u1", "u2")
    gateway.add_card("cus_owner")

    response = client.post("/charge-payment", json=_charge_payload(booking_type=None))

    assert response.status_code == status.HTTP_200_OK
    assert customers.booking_row(BookingType.WALKING, "b7").status == "confirmed"


def test_charge_without_card_fails_closed(client, customers, gateway) -> None:
    response = client.post("/charge-payment", json=_charge_payload())

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "No payment method found"}
    assert gateway.intents == []


def test_charge_for_sitter_without_account_fails_closed(client, seed, gateway) -> None:
    seed.profile("u2", "Sam Sitter")
    gateway.add_card("cus_owner")

    response = client.post("/charge-payment", json=_charge_payload())

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "Sitter Stripe account not found"}


def test_declined_charge_returns_processor_message(client, customers, gateway) -> None:
    gateway.add_card("cus_owner")
    gateway.error = PaymentError("Your card was declined. (card_declined)")

    response = client.post("/charge-payment", json=_charge_payload())

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "Your card was declined. (card_declined)"}


def test_charge_payload_is_validated(client, gateway) -> None:
    response = client.post("/charge-payment", json={"customer_id": "cus_owner"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "error" in response.json()
    assert gateway.intents == []


def test_get_payment_methods(client, customers, gateway) -> None:
    gateway.add_card("cus_owner", "pm_1")

    response = client.post("/get-payment-methods", json={"owner_id": "u1"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "paymentMethods": [
            {"id": "pm_1", "brand": "visa", "last4": "4242", "expMonth": 12, "expYear": 2030}
        ]
    }


def test_get_payment_methods_without_customer(client, customers, gateway) -> None:
    response = client.post("/get-payment-methods", json={"owner_id": "u2"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"paymentMethods": []}


def test_get_payment_methods_requires_owner(client) -> None:
    response = client.post("/get-payment-methods", json={})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "error" in response.json()


@pytest.mark.parametrize("total_price", ["Infinity", "-Infinity", "NaN"])
def test_non_finite_total_fails_closed(client, customers, gateway, total_price) -> None:
    customers.booking(BookingType.WALKING, "b7", "u1", "u2")
    gateway.add_card("cus_owner")
    body = (
        '{"customer_id": "cus_owner", "total_price": %s, "sitter_id": "u2", '
        '"booking_id": "b7", "booking_type": "walking"}' % total_price
    )

    response = client.post(
        "/charge-payment",
        content=body.encode(),
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "error" in response.json()
    assert gateway.intents == []
    assert customers.booking_row(BookingType.WALKING, "b7").status == "pending"
