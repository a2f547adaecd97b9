"""Read-side lookups used while building notifications.

Every lookup runs in a worker thread with its own session and a bounded
timeout. Failures are logged and reported as a missing entity so that the
calling handler aborts without writing a notification.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from dogsitter.domain.entities import MessageThread, Profile
from dogsitter.infrastructure.database import SessionFactory, run_in_session
from dogsitter.infrastructure.repositories import (
    MessageThreadRepository,
    ProfileRepository,
)

logger = logging.getLogger(__name__)


class ProfileLookup:
    """Resolve a user identifier to its display name and delivery token."""

    def __init__(self, session_factory: SessionFactory, *, timeout: float) -> None:
        self._session_factory = session_factory
        self._timeout = timeout

    async def get(self, profile_id: str) -> Profile | None:
        try:
            return await run_in_session(
                self._session_factory,
                lambda session: ProfileRepository(session).get(profile_id),
                timeout=self._timeout,
            )
        except (SQLAlchemyError, TimeoutError) as exc:
            logger.error("Error fetching profile %s: %s", profile_id, exc)
            return None


class ThreadResolver:
    """Resolve a conversation identifier to its two participants."""

    def __init__(self, session_factory: SessionFactory, *, timeout: float) -> None:
        self._session_factory = session_factory
        self._timeout = timeout

    async def get(self, thread_id: str) -> MessageThread | None:
        try:
            return await run_in_session(
                self._session_factory,
                lambda session: MessageThreadRepository(session).get(thread_id),
                timeout=self._timeout,
            )
        except (SQLAlchemyError, TimeoutError) as exc:
            logger.error("Error fetching message thread %s: %s", thread_id, exc)
            return None


__all__ = ["ProfileLookup", "ThreadResolver"]
