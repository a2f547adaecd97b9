"""Persistence helpers for conversation threads."""

from __future__ import annotations

from sqlalchemy.orm import Session

from dogsitter.domain.entities import MessageThread
from dogsitter.infrastructure.models import MessageThreadModel


class MessageThreadRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, thread_id: str) -> MessageThread | None:
        model = self.session.get(MessageThreadModel, thread_id)
        if model is None:
            return None
        return MessageThread(
            id=model.id,
            owner_id=model.owner_id,
            sitter_id=model.sitter_id,
            booking_id=model.booking_id,
        )


__all__ = ["MessageThreadRepository"]
