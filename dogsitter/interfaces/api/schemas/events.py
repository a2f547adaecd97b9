"""Pydantic models validating inbound change events."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dogsitter.domain.entities import (
    OPERATION_DELETE,
    OPERATION_INSERT,
    Booking,
    BookingSnapshot,
    ChangeEvent,
    EventKind,
    EventRecord,
    Message,
    Review,
)
from dogsitter.domain.errors import MalformedEventError

CHANGE_EVENT_SCHEMA_VERSION = 1


class _RecordSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class MessageRecord(_RecordSchema):
    id: str = Field(..., min_length=1)
    thread_id: str = Field(..., min_length=1)
    sender_id: str = Field(..., min_length=1)
    content: str


class BookingRecord(_RecordSchema):
    id: str = Field(..., min_length=1)
    owner_id: str = Field(..., min_length=1)
    sitter_id: str = Field(..., min_length=1)
    status: str = Field(..., min_length=1)


class PreviousBookingRecord(_RecordSchema):
    """Only the status of the previous row is needed to detect transitions."""

    id: str | None = None
    status: str = Field(..., min_length=1)


class ReviewRecord(_RecordSchema):
    id: str = Field(..., min_length=1)
    reviewer_id: str = Field(..., min_length=1)
    reviewee_id: str = Field(..., min_length=1)


class ChangeEventRequest(BaseModel):
    """Envelope posted by the database webhook for every row change."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: str = Field(default=OPERATION_INSERT, description="INSERT, UPDATE or DELETE")
    table: str = Field(..., min_length=1)
    schema_name: str = Field(default="public", alias="schema")
    version: int = Field(default=CHANGE_EVENT_SCHEMA_VERSION)
    # Row payloads are only checked once the table is known to be handled.
    record: Any = None
    old_record: Any = None

    @field_validator("type")
    @classmethod
    def _normalize_type(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("version")
    @classmethod
    def _check_version(cls, value: int) -> int:
        if value != CHANGE_EVENT_SCHEMA_VERSION:
            raise ValueError(f"Unsupported change event version {value}")
        return value

    def to_event(self) -> ChangeEvent:
        """Validate the record for the table's kind and build the domain event.

        Raises :class:`MalformedEventError` when a handled table carries a
        record that does not match its schema.
        """

        kind = EventKind.from_table(self.table)
        if kind is None or self.type == OPERATION_DELETE:
            return ChangeEvent(table=self.table, operation=self.type, kind=kind)

        if self.record is None:
            raise MalformedEventError(f"Missing record for {self.table} event")
        if not isinstance(self.record, dict):
            raise MalformedEventError(f"Invalid {self.table} record: expected an object")
        previous_data = self.old_record if kind.booking_type is not None else None
        if previous_data is not None and not isinstance(previous_data, dict):
            raise MalformedEventError(f"Invalid {self.table} old_record: expected an object")

        try:
            record = _parse_record(kind, self.record)
            previous = None
            if previous_data is not None:
                old = PreviousBookingRecord.model_validate(previous_data)
                previous = BookingSnapshot(status=old.status, id=old.id)
        except ValidationError as exc:
            raise MalformedEventError(
                f"Invalid {self.table} record: {_describe_errors(exc)}"
            ) from exc

        return ChangeEvent(
            table=self.table,
            operation=self.type,
            kind=kind,
            record=record,
            previous=previous,
        )


def _parse_record(kind: EventKind, data: dict[str, Any]) -> EventRecord:
    if kind is EventKind.MESSAGES:
        message = MessageRecord.model_validate(data)
        return Message(
            id=message.id,
            thread_id=message.thread_id,
            sender_id=message.sender_id,
            content=message.content,
        )
    if kind is EventKind.REVIEWS:
        review = ReviewRecord.model_validate(data)
        return Review(id=review.id, reviewer_id=review.reviewer_id, reviewee_id=review.reviewee_id)

    booking = BookingRecord.model_validate(data)
    return Booking(
        id=booking.id,
        owner_id=booking.owner_id,
        sitter_id=booking.sitter_id,
        status=booking.status,
        booking_type=kind.booking_type,
    )


def _describe_errors(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts)


__all__ = [
    "BookingRecord",
    "CHANGE_EVENT_SCHEMA_VERSION",
    "ChangeEventRequest",
    "MessageRecord",
    "PreviousBookingRecord",
    "ReviewRecord",
]
