"""Validation of the change event envelope before dispatch."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from dogsitter.domain.entities import (
    Booking,
    BookingType,
    EventKind,
    Message,
    Review,
)
from dogsitter.domain.errors import MalformedEventError
from dogsitter.interfaces.api.schemas import ChangeEventRequest


def test_message_event_is_parsed_into_a_message() -> None:
    event = ChangeEventRequest.model_validate(
        {
            "type": "insert",
            "table": "messages",
            "schema": "public",
            "record": {
                "id": "m1",
                "thread_id": "t1",
                "sender_id": "u1",
                "content": "See you at 5",
                "created_at": "2024-05-01T10:00:00Z",
            },
            "old_record": None,
        }
    ).to_event()

    assert event.kind is EventKind.MESSAGES
    assert event.operation == "INSERT"
    assert event.record == Message(id="m1", thread_id="t1", sender_id="u1", content="See you at 5")
    assert event.previous is None


def test_booking_table_encodes_the_booking_type() -> None:
    event = ChangeEventRequest.model_validate(
        {
            "type": "UPDATE",
            "table": "boarding_bookings",
            "record": {"id": "b9", "owner_id": "u1", "sitter_id": "u2", "status": "cancelled"},
            "old_record": {"status": "confirmed"},
        }
    ).to_event()

    assert isinstance(event.record, Booking)
    assert event.record.booking_type is BookingType.BOARDING
    assert event.previous is not None
    assert event.previous.status == "confirmed"


def test_numeric_identifiers_are_accepted_as_strings() -> None:
    event = ChangeEventRequest.model_validate(
        {"table": "reviews", "record": {"id": 7, "reviewer_id": 1, "reviewee_id": 2}}
    ).to_event()

    assert event.record == Review(id="7", reviewer_id="1", reviewee_id="2")


def test_unknown_table_is_not_parsed() -> None:
    event = ChangeEventRequest.model_validate(
        {"table": "dogs", "record": {"anything": "goes"}}
    ).to_event()

    assert event.kind is None
    assert event.record is None


@pytest.mark.parametrize("record", [["a", "list"], "text", 42, {"anything": "goes"}])
def test_unknown_table_accepts_any_record_shape(record) -> None:
    event = ChangeEventRequest.model_validate({"table": "dogs", "record": record}).to_event()

    assert event.kind is None
    assert event.record is None


def test_delete_event_carries_no_record() -> None:
    event = ChangeEventRequest.model_validate(
        {"type": "DELETE", "table": "messages", "old_record": {"id": "m1"}}
    ).to_event()

    assert event.kind is EventKind.MESSAGES
    assert event.record is None


@pytest.mark.parametrize(
    "payload",
    [
        {"table": "messages", "record": {"id": "m1", "thread_id": "t1", "content": "hi"}},
        {"table": "walking_bookings", "record": {"id": "b1", "owner_id": "u1", "sitter_id": "u2"}},
        {
            "table": "walking_bookings",
            "record": {"id": "b1", "owner_id": "u1", "sitter_id": "u2", "status": "confirmed"},
            "old_record": {"id": "b1"},
        },
        {"table": "reviews"},
        {"table": "messages", "record": ["not", "an", "object"]},
        {
            "table": "boarding_bookings",
            "record": {"id": "b1", "owner_id": "u1", "sitter_id": "u2", "status": "confirmed"},
            "old_record": "pending",
        },
    ],
)
def test_malformed_records_are_rejected(payload) -> None:
    request = ChangeEventRequest.model_validate(payload)
    with pytest.raises(MalformedEventError):
        request.to_event()


@pytest.mark.parametrize(
    "payload",
    [
        {"record": {}},
        {"table": "messages", "version": 2, "record": {}},
    ],
)
def test_malformed_envelopes_are_rejected(payload) -> None:
    with pytest.raises(ValidationError):
        ChangeEventRequest.model_validate(payload)
