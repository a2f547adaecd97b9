"""Persistence helpers for profile entities."""

from __future__ import annotations

from sqlalchemy.orm import Session

from dogsitter.domain.entities import Profile
from dogsitter.infrastructure.models import ProfileModel


class ProfileRepository:
    """Read access to :class:`Profile` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, profile_id: str) -> Profile | None:
        model = self.session.get(ProfileModel, profile_id)
        return self._to_entity(model) if model else None

    @staticmethod
    def _to_entity(model: ProfileModel) -> Profile:
        return Profile(
            id=model.id,
            full_name=model.full_name,
            push_token=model.expo_push_token or None,
            notifications_enabled=bool(model.notifications_enabled),
            stripe_customer_id=model.stripe_customer_id or None,
            stripe_account_id=model.stripe_account_id or None,
        )


__all__ = ["ProfileRepository"]
