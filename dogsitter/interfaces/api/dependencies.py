"""FastAPI dependency utilities."""

from fastapi import Depends

from dogsitter.application.use_cases.notifications import EventRouter, build_event_router
from dogsitter.application.use_cases.notifications.writer import PushSender
from dogsitter.application.use_cases.payments import PaymentGateway
from dogsitter.config import Settings, get_settings
from dogsitter.infrastructure import database
from dogsitter.infrastructure.database import SessionFactory
from dogsitter.infrastructure.notifications import ExpoPushClient
from dogsitter.infrastructure.payments import StripeGateway


def get_session_factory() -> SessionFactory:
    """Return the factory used to open one session per remote call."""

    return database.SessionLocal


def get_push_sender(settings: Settings = Depends(get_settings)) -> PushSender:
    return ExpoPushClient(
        settings.expo_push_url,
        access_token=settings.expo_access_token,
        timeout=settings.remote_call_timeout_seconds,
    )


def get_payment_gateway(settings: Settings = Depends(get_settings)) -> PaymentGateway:
    return StripeGateway(
        settings.stripe_secret_key,
        api_url=settings.stripe_api_url,
        timeout=settings.remote_call_timeout_seconds,
    )


def get_event_router(
    session_factory: SessionFactory = Depends(get_session_factory),
    push_sender: PushSender = Depends(get_push_sender),
    settings: Settings = Depends(get_settings),
) -> EventRouter:
    return build_event_router(
        session_factory,
        push_sender,
        timeout=settings.remote_call_timeout_seconds,
    )


__all__ = [
    "get_event_router",
    "get_payment_gateway",
    "get_push_sender",
    "get_session_factory",
]
