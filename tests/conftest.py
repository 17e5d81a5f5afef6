"""Pytest fixtures for Loyalty Cards tests."""

import mongomock
import pytest
from fastapi.testclient import TestClient

from loyalty_app.core import MongoStore, Settings
from loyalty_app.schemas.client import ClientPayload
from loyalty_app.services import ClientService
from main import create_app


@pytest.fixture
def settings():
    """Settings with a dummy connection string."""
    return Settings(MONGODB_URI="mongodb://localhost:27017", _env_file=None)


@pytest.fixture
def store():
    """In-memory document store."""
    return MongoStore(mongomock.MongoClient(), "loyalty-app-test", "clients")


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def http_client(app):
    """TestClient with lifespan running."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def alice(store):
    """Create a test client."""
    return ClientService.create_client(
        store, ClientPayload(name="Alice", phone="0600000000", address="1 rue des Lilas")
    )


@pytest.fixture
def bob(store):
    """Create a second test client."""
    return ClientService.create_client(
        store, ClientPayload(name="Bob", phone="0700000000", loyaltyPoints=12)
    )
