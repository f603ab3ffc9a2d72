from __future__ import annotations

from fastapi.testclient import TestClient

from fakes import FakeStorage, build_session_manager, make_user
from guestnama.api.deps import get_metrics_aggregator, get_session_manager
from guestnama.application.services.metrics_aggregator import MetricsAggregator
from guestnama.application.services.session_manager import SessionManager
from guestnama.domain.entities.user import SessionUser
from guestnama.domain.exceptions import StorageError
from guestnama.infrastructure.session.memory_session_store import InMemorySessionStore
from guestnama.main import app


def _override(storage: FakeStorage) -> tuple[SessionManager, InMemorySessionStore]:
    store = InMemorySessionStore()
    manager = build_session_manager(storage, session_store=store)
    aggregator = MetricsAggregator(event_records=storage)
    app.dependency_overrides[get_session_manager] = lambda: manager
    app.dependency_overrides[get_metrics_aggregator] = lambda: aggregator
    return manager, store


def test_login_returns_session_and_persists_it():
    storage = FakeStorage()
    storage.users.append(make_user())
    manager, store = _override(storage)

    with TestClient(app) as client:
        response = client.post("/v1/auth/login", json={"phone": "0300-1234567", "password": "secret"})
        session = client.get("/v1/auth/session")

    assert response.status_code == 200
    payload = response.json()
    assert payload["is_authenticated"] is True
    assert payload["user"]["phone"] == "3001234567"
    assert "password_hash" not in payload["user"]
    assert session.json() == payload
    assert store.get() == manager.user
    assert manager.is_revalidation_armed is False

    app.dependency_overrides.clear()


def test_login_with_wrong_password_is_unauthorized():
    storage = FakeStorage()
    storage.users.append(make_user())
    _override(storage)

    with TestClient(app) as client:
        response = client.post("/v1/auth/login", json={"phone": "03001234567", "password": "nope"})
        session = client.get("/v1/auth/session")

    assert response.status_code == 401
    assert session.json() == {"is_authenticated": False, "is_loading": False, "user": None}

    app.dependency_overrides.clear()


def test_login_storage_failure_is_bad_gateway():
    storage = FakeStorage()
    storage.failures["get_users"] = StorageError("down")
    _override(storage)

    with TestClient(app) as client:
        response = client.post("/v1/auth/login", json={"phone": "03001234567", "password": "secret"})

    assert response.status_code == 502

    app.dependency_overrides.clear()


def test_signup_conflict_and_logout():
    storage = FakeStorage()
    storage.users.append(make_user(phone="3001234567"))
    manager, store = _override(storage)

    with TestClient(app) as client:
        conflict = client.post("/v1/auth/signup", json={"name": "B", "phone": "0300-1234567", "password": "y"})
        created = client.post("/v1/auth/signup", json={"name": "C", "phone": "0311-7654321", "password": "z"})
        logout = client.post("/v1/auth/logout")

    assert conflict.status_code == 409
    assert created.status_code == 200
    assert created.json()["user"]["role"] == "USER"
    assert created.json()["user"]["phone"] == "3117654321"
    assert logout.json() == {"ok": True}
    assert store.get() is None
    assert manager.user is None

    app.dependency_overrides.clear()


def test_startup_drops_session_rejected_by_storage():
    storage = FakeStorage()
    store = InMemorySessionStore(
        SessionUser(
            id="deleted-user",
            name="Ayesha",
            phone="3001234567",
            role="USER",
            created_at="2024-01-01T00:00:00.000Z",
        )
    )
    manager = build_session_manager(storage, session_store=store)
    app.dependency_overrides[get_session_manager] = lambda: manager

    with TestClient(app) as client:
        session = client.get("/v1/auth/session")

    assert session.json()["is_authenticated"] is False
    assert store.get() is None
    assert storage.calls == ["verify_session"]

    app.dependency_overrides.clear()
