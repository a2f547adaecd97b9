"""SQLAlchemy model for conversation threads."""

from sqlalchemy import Column, DateTime, ForeignKey, String

from dogsitter.infrastructure.database import Base
from dogsitter.utils import now_in_utc_naive


class MessageThreadModel(Base):
    __tablename__ = "message_threads"

    id = Column(String(36), primary_key=True)
    owner_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    sitter_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    booking_id = Column(String(36), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_utc_naive)


__all__ = ["MessageThreadModel"]
