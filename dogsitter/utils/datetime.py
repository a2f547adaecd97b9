"""Helpers for working with timezone-aware datetimes."""

from __future__ import annotations

from datetime import datetime, timezone


def now_in_utc() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(tz=timezone.utc)


def now_in_utc_naive() -> datetime:
    """Return the current UTC time without attaching ``tzinfo``."""

    return now_in_utc().replace(tzinfo=None)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Normalize ``value`` so it is expressed in UTC.

    Naive values are assumed to already be UTC, which is how they are stored.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def ensure_naive_utc(value: datetime | None) -> datetime | None:
    """Return ``value`` converted to UTC but without ``tzinfo``.

    Portable ``DateTime`` columns do not keep the offset, so every stored
    timestamp is the naive UTC representation.
    """

    localized = ensure_utc(value)
    if localized is None:
        return None
    return localized.replace(tzinfo=None)
