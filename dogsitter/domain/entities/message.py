"""Domain entities for conversations between owners and sitters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MessageThread:
    """Conversation between an owner and a sitter, optionally about a booking."""

    id: str
    owner_id: str
    sitter_id: str
    booking_id: str | None = None

    def counterpart_of(self, participant_id: str) -> str:
        """Return the participant on the other side of ``participant_id``."""

        if participant_id == self.owner_id:
            return self.sitter_id
        return self.owner_id


@dataclass
class Message:
    """A single message posted to a thread."""

    id: str
    thread_id: str
    sender_id: str
    content: str


__all__ = ["Message", "MessageThread"]
