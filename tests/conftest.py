"""
Shared pytest fixtures for the travel organizer tests.
"""

import pytest
from fastapi.testclient import TestClient

from services.local_store import LocalStore
from services.store import set_store


@pytest.fixture
def store(tmp_path):
    """Point the services at a fresh local store in a temp directory."""
    local_store = LocalStore(str(tmp_path / "store.json"))
    set_store(local_store)
    yield local_store
    set_store(None)


@pytest.fixture
def client(store):
    from main import app

    return TestClient(app)


@pytest.fixture
def trip_payload():
    return {
        "name": "Mountain Adventure",
        "destination": "Yosemite National Park",
        "duration": 7,
        "temp_min": 15,
        "temp_max": 25,
        "activities": ["hiking"],
    }


@pytest.fixture
def planned(client, trip_payload):
    """A trip planned through the API, with its generated list."""
    response = client.post("/api/trips/plan", json=trip_payload)
    assert response.status_code == 201
    return response.json()
