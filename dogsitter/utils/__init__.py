"""Utility helpers for reusable functionality."""

from .datetime import ensure_naive_utc, ensure_utc, now_in_utc, now_in_utc_naive

__all__ = [
    "ensure_naive_utc",
    "ensure_utc",
    "now_in_utc",
    "now_in_utc_naive",
]
