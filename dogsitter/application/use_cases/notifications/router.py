"""Route change events to the handler matching their source table."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from dogsitter.domain.entities import (
    OPERATION_DELETE,
    Booking,
    ChangeEvent,
    EventKind,
    Message,
    NotificationWriteResult,
    Review,
)
from dogsitter.infrastructure.database import SessionFactory

from .handlers import (
    NotificationServices,
    notify_booking_change,
    notify_new_message,
    notify_new_review,
)
from .lookups import ProfileLookup, ThreadResolver
from .writer import NotificationWriter, PushSender

logger = logging.getLogger(__name__)

EventHandler = Callable[[ChangeEvent], Awaitable["NotificationWriteResult | None"]]


@dataclass(frozen=True)
class DispatchResult:
    """What happened to a single change event."""

    table: str
    kind: EventKind | None
    outcome: NotificationWriteResult | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def handled(self) -> bool:
        return self.kind is not None


class EventRouter:
    """Dispatch each change event to at most one notification handler.

    Unknown tables are logged and ignored. Any exception raised by a handler
    is logged and turned into a failed :class:`DispatchResult`; nothing is
    retried.
    """

    def __init__(self, services: NotificationServices) -> None:
        self._services = services
        self._handlers: dict[EventKind, EventHandler] = {
            EventKind.MESSAGES: self._on_message,
            EventKind.WALKING_BOOKINGS: self._on_booking,
            EventKind.BOARDING_BOOKINGS: self._on_booking,
            EventKind.REVIEWS: self._on_review,
        }
        missing = set(EventKind) - set(self._handlers)
        if missing:
            names = ", ".join(sorted(kind.value for kind in missing))
            raise RuntimeError(f"No handler registered for event kinds: {names}")

    async def dispatch(self, event: ChangeEvent) -> DispatchResult:
        if event.kind is None:
            logger.warning("Unhandled event kind for table %s; ignoring", event.table)
            return DispatchResult(table=event.table, kind=None)

        if event.operation == OPERATION_DELETE or event.record is None:
            logger.info("Ignoring %s event on %s", event.operation, event.table)
            return DispatchResult(table=event.table, kind=event.kind)

        handler = self._handlers[event.kind]
        try:
            outcome = await handler(event)
        except Exception as exc:
            logger.exception(
                "Error processing notification for %s record %s",
                event.table,
                getattr(event.record, "id", None),
            )
            return DispatchResult(
                table=event.table,
                kind=event.kind,
                error=str(exc) or "Unknown error",
            )
        return DispatchResult(table=event.table, kind=event.kind, outcome=outcome)

    async def _on_message(self, event: ChangeEvent) -> NotificationWriteResult | None:
        assert isinstance(event.record, Message)
        return await notify_new_message(self._services, event.record)

    async def _on_booking(self, event: ChangeEvent) -> NotificationWriteResult | None:
        assert isinstance(event.record, Booking)
        return await notify_booking_change(self._services, event.record, event.previous)

    async def _on_review(self, event: ChangeEvent) -> NotificationWriteResult | None:
        assert isinstance(event.record, Review)
        return await notify_new_review(self._services, event.record)


def build_event_router(
    session_factory: SessionFactory,
    push_sender: PushSender,
    *,
    timeout: float,
) -> EventRouter:
    """Wire the lookups and the writer around a session factory."""

    profiles = ProfileLookup(session_factory, timeout=timeout)
    threads = ThreadResolver(session_factory, timeout=timeout)
    writer = NotificationWriter(session_factory, profiles, push_sender, timeout=timeout)
    return EventRouter(NotificationServices(profiles=profiles, threads=threads, writer=writer))


__all__ = ["DispatchResult", "EventRouter", "build_event_router"]
