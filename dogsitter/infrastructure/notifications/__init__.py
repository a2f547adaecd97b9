"""Outbound notification delivery for the infrastructure layer."""

from .push import ExpoPushClient

__all__ = ["ExpoPushClient"]
