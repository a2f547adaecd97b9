"""Fixtures exposing the FastAPI application with test collaborators."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from dogsitter.interfaces.api.dependencies import (
    get_payment_gateway,
    get_push_sender,
    get_session_factory,
)
from main import create_app


@pytest.fixture
def client(session_factory, push_sender, gateway):
    app = create_app()
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_push_sender] = lambda: push_sender
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
