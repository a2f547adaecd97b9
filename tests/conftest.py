"""Shared fixtures for the notification and payment tests."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# ``dogsitter.infrastructure.database`` builds its engine at import time.
os.environ.setdefault(
    "DATABASE_URL", f"sqlite:///{Path(tempfile.gettempdir()) / 'dogsitter-tests.db'}"
)

from dogsitter.application.use_cases.notifications import build_event_router
from dogsitter.domain.entities import (
    BookingType,
    Notification,
    PaymentIntent,
    PaymentMethod,
    PushMessage,
)
from dogsitter.domain.errors import PaymentError
from dogsitter.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from dogsitter.infrastructure.models import (
    BOOKING_MODELS,
    MessageThreadModel,
    NotificationModel,
    ProfileModel,
)
from dogsitter.infrastructure.repositories import NotificationRepository


class RecordingPushSender:
    """Push sender that records messages instead of calling Expo."""

    def __init__(self) -> None:
        self.messages: list[PushMessage] = []
        self.error: Exception | None = None

    async def send(self, message: PushMessage) -> None:
        if self.error is not None:
            raise self.error
        self.messages.append(message)


class FakeStripeGateway:
    """In-memory payment processor with one saved card per known customer."""

    def __init__(self) -> None:
        self.cards: dict[str, list[PaymentMethod]] = {}
        self.intents: list[dict] = []
        self.error: PaymentError | None = None

    def add_card(self, customer_id: str, method_id: str = "pm_visa") -> None:
        self.cards.setdefault(customer_id, []).append(
            PaymentMethod(id=method_id, brand="visa", last4="4242", exp_month=12, exp_year=2030)
        )

    async def list_card_payment_methods(self, customer_id, *, limit=None):
        methods = list(self.cards.get(customer_id, []))
        return methods[:limit] if limit is not None else methods

    async def create_payment_intent(self, **kwargs) -> PaymentIntent:
        if self.error is not None:
            raise self.error
        self.intents.append(kwargs)
        return PaymentIntent(
            id=f"pi_{len(self.intents)}",
            status="succeeded",
            amount=kwargs["amount"],
            application_fee_amount=kwargs["application_fee_amount"],
        )


class Seeder:
    """Insert rows the way the mobile client would have created them."""

    def __init__(self, session_factory) -> None:
        self._session_factory = session_factory

    def _add(self, model) -> None:
        with self._session_factory() as session:
            session.add(model)
            session.commit()

    def profile(self, profile_id: str, full_name: str, **fields) -> None:
        self._add(ProfileModel(id=profile_id, full_name=full_name, **fields))

    def thread(self, thread_id: str, owner_id: str, sitter_id: str, booking_id=None) -> None:
        self._add(
            MessageThreadModel(
                id=thread_id, owner_id=owner_id, sitter_id=sitter_id, booking_id=booking_id
            )
        )

    def booking(
        self,
        booking_type: BookingType,
        booking_id: str,
        owner_id: str,
        sitter_id: str,
        status: str = "pending",
    ) -> None:
        self._add(
            BOOKING_MODELS[booking_type](
                id=booking_id, owner_id=owner_id, sitter_id=sitter_id, status=status
            )
        )

    def booking_row(self, booking_type: BookingType, booking_id: str):
        with self._session_factory() as session:
            return session.get(BOOKING_MODELS[booking_type], booking_id)

    def notifications(self) -> list[Notification]:
        with self._session_factory() as session:
            models = session.query(NotificationModel).all()
            return [NotificationRepository._to_entity(model) for model in models]


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'dogsitter.db'}")
    initialize_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def seed(session_factory) -> Seeder:
    return Seeder(session_factory)


@pytest.fixture
def push_sender() -> RecordingPushSender:
    return RecordingPushSender()


@pytest.fixture
def event_router(session_factory, push_sender):
    return build_event_router(session_factory, push_sender, timeout=5)


@pytest.fixture
def people(seed: Seeder) -> Seeder:
    """An owner and a sitter who both registered for push notifications."""

    seed.profile("u1", "Olivia Owner", expo_push_token="ExponentPushToken[owner]")
    seed.profile("u2", "Sam Sitter", expo_push_token="ExponentPushToken[sitter]")
    return seed


@pytest.fixture
def gateway() -> FakeStripeGateway:
    return FakeStripeGateway()


@pytest.fixture
def customers(seed: Seeder) -> Seeder:
    """An owner with a Stripe customer and a sitter with a connected account."""

    seed.profile("u1", "Olivia Owner", stripe_customer_id="cus_owner")
    seed.profile("u2", "Sam Sitter", stripe_account_id="acct_sitter")
    return seed
