"""Persist notifications and deliver them as push messages."""

from __future__ import annotations

import logging
from typing import Protocol

import anyio
from sqlalchemy.exc import SQLAlchemyError

from dogsitter.domain.entities import (
    Notification,
    NotificationDraft,
    NotificationWriteResult,
    PushDelivered,
    PushFailed,
    PushMessage,
    PushOutcome,
    PushSkipped,
)
from dogsitter.domain.errors import NotificationWriteError
from dogsitter.infrastructure.database import SessionFactory, run_in_session
from dogsitter.infrastructure.repositories import NotificationRepository
from dogsitter.utils import now_in_utc

from .lookups import ProfileLookup

logger = logging.getLogger(__name__)

PUSH_SKIPPED_NO_PROFILE = "recipient profile not found"
PUSH_SKIPPED_NO_TOKEN = "recipient has no delivery token"
PUSH_SKIPPED_DISABLED = "recipient disabled notifications"


class PushSender(Protocol):
    async def send(self, message: PushMessage) -> None: ...


class NotificationWriter:
    """Write the notification row first, then attempt one push.

    The row is the source of truth: when the insert fails nothing is pushed
    and :class:`NotificationWriteError` is raised. A failing push is logged
    and reported in the result but never raised.
    """

    def __init__(
        self,
        session_factory: SessionFactory,
        profiles: ProfileLookup,
        push_sender: PushSender,
        *,
        timeout: float,
    ) -> None:
        self._session_factory = session_factory
        self._profiles = profiles
        self._push_sender = push_sender
        self._timeout = timeout

    async def write(self, draft: NotificationDraft) -> NotificationWriteResult:
        notification = Notification(
            id=None,
            recipient_id=draft.recipient_id,
            type=draft.type,
            title=draft.title,
            body=draft.body,
            data=dict(draft.data),
            is_read=False,
            created_at=now_in_utc(),
        )
        try:
            record = await run_in_session(
                self._session_factory,
                lambda session: NotificationRepository(session).create(notification),
                timeout=self._timeout,
            )
        except (SQLAlchemyError, TimeoutError) as exc:
            logger.error(
                "Error creating %s notification for %s: %s",
                draft.type.value,
                draft.recipient_id,
                exc,
            )
            raise NotificationWriteError(
                f"Could not store notification for {draft.recipient_id}"
            ) from exc

        push = await self._push(record)
        return NotificationWriteResult(record=record, push=push)

    async def _push(self, record: Notification) -> PushOutcome:
        profile = await self._profiles.get(record.recipient_id)
        if profile is None:
            return PushSkipped(PUSH_SKIPPED_NO_PROFILE)
        if not profile.push_token:
            return PushSkipped(PUSH_SKIPPED_NO_TOKEN)
        if not profile.notifications_enabled:
            return PushSkipped(PUSH_SKIPPED_DISABLED)

        message = PushMessage(
            to=profile.push_token,
            title=record.title,
            body=record.body,
            data=record.data,
        )
        try:
            with anyio.fail_after(self._timeout):
                await self._push_sender.send(message)
        except Exception as exc:  # push delivery is best effort
            logger.error(
                "Error sending push notification %s to %s: %s",
                record.id,
                record.recipient_id,
                exc,
            )
            return PushFailed(str(exc) or exc.__class__.__name__)
        return PushDelivered()


__all__ = [
    "NotificationWriter",
    "PUSH_SKIPPED_DISABLED",
    "PUSH_SKIPPED_NO_PROFILE",
    "PUSH_SKIPPED_NO_TOKEN",
    "PushSender",
]
