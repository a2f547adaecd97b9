"""SQLAlchemy model for the profiles table."""

from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.sql import expression

from dogsitter.infrastructure.database import Base
from dogsitter.utils import now_in_utc_naive


class ProfileModel(Base):
    """Database representation of an owner or sitter profile."""

    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True)
    full_name = Column(String(120), nullable=False)
    expo_push_token = Column(String(255), nullable=True)
    notifications_enabled = Column(
        Boolean,
        nullable=False,
        default=True,
        server_default=expression.true(),
    )
    stripe_customer_id = Column(String(255), nullable=True)
    stripe_account_id = Column(String(255), nullable=True)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_utc_naive)


__all__ = ["ProfileModel"]
