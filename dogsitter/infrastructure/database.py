"""Database configuration and session management."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import anyio
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from dogsitter.config import get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


T = TypeVar("T")
SessionFactory = Callable[[], Session]


def build_engine(database_url: str) -> Engine:
    """Create an engine for ``database_url``.

    SQLite connections are used from worker threads, so the same-thread
    check is disabled for them.
    """

    connect_args: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)


def build_session_factory(bind: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=bind)


settings = get_settings()

engine = build_engine(settings.database_url)
SessionLocal = build_session_factory(engine)


def initialize_database(bind: Engine | None = None) -> None:
    """Ensure all ORM models have corresponding database tables."""

    from dogsitter.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=bind or engine, checkfirst=True)


async def run_in_session(
    session_factory: SessionFactory,
    work: Callable[[Session], T],
    *,
    timeout: float,
) -> T:
    """Run ``work`` with a fresh session in a worker thread.

    The call is abandoned after ``timeout`` seconds and ``TimeoutError`` is
    raised, the same way a failing query surfaces its own exception.
    """

    def _call() -> T:
        with session_factory() as session:
            return work(session)

    with anyio.fail_after(timeout):
        return await anyio.to_thread.run_sync(_call, abandon_on_cancel=True)


__all__ = [
    "Base",
    "SessionFactory",
    "SessionLocal",
    "build_engine",
    "build_session_factory",
    "engine",
    "initialize_database",
    "run_in_session",
]
