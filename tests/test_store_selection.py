"""Tests for choosing between Firebase and the local fallback store."""

import pytest

from core.config import settings
from services import store as store_module
from services.firebase_service import initialize_firebase
from services.local_store import LocalStore


@pytest.fixture
def no_store():
    store_module.set_store(None)
    yield
    store_module.set_store(None)


def test_firebase_not_configured(monkeypatch):
    monkeypatch.setattr(settings, "FIREBASE_SERVICE_ACCOUNT_KEY_JSON", None)
    monkeypatch.setattr(settings, "FIREBASE_DATABASE_URL", None)
    assert initialize_firebase() is False


def test_invalid_service_account_key(monkeypatch):
    monkeypatch.setattr(settings, "FIREBASE_SERVICE_ACCOUNT_KEY_JSON", "{not json")
    monkeypatch.setattr(settings, "FIREBASE_DATABASE_URL", "https://example.firebaseio.com")
    assert initialize_firebase() is False


def test_falls_back_to_local_store(monkeypatch, tmp_path, no_store):
    monkeypatch.setattr(settings, "FIREBASE_SERVICE_ACCOUNT_KEY_JSON", None)
    monkeypatch.setattr(settings, "LOCAL_STORE_PATH", str(tmp_path / "fallback.json"))

    selected = store_module.get_store()

    assert isinstance(selected, LocalStore)
    assert selected.backend == "local"
    assert selected.path == str(tmp_path / "fallback.json")
    assert store_module.get_store() is selected


def test_uses_firebase_when_initialized(monkeypatch, no_store):
    monkeypatch.setattr(store_module, "initialize_firebase", lambda: True)
    assert store_module.get_store().backend == "firebase"
