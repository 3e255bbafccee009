import random

import pytest
from fastapi.testclient import TestClient

from app.routes.api_server import app
from app.routes.deck_routes import get_deck_store
from app.services.deck_service import DeckService
from app.services.deck_store import InMemoryDeckStore


@pytest.fixture
def store() -> InMemoryDeckStore:
    return InMemoryDeckStore()


@pytest.fixture
def service(store) -> DeckService:
    return DeckService(store, rng=random.Random(1234))


@pytest.fixture
def client(store):
    app.dependency_overrides[get_deck_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
