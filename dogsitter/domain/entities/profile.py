"""Domain entity representing a marketplace user profile."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Profile:
    """Display and delivery information for an owner or a sitter."""

    id: str
    full_name: str
    push_token: str | None = None
    notifications_enabled: bool = True
    stripe_customer_id: str | None = None
    stripe_account_id: str | None = None


__all__ = ["Profile"]
