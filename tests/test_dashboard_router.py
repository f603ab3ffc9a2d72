from __future__ import annotations

import time

from fastapi.testclient import TestClient

from fakes import (
    FakeStorage,
    SequentialIdGenerator,
    build_session_manager,
    make_finance_entry,
    make_guest,
    make_task,
    make_user,
)
from guestnama.api import deps
from guestnama.api.deps import (
    get_add_guest_use_case,
    get_cycle_rsvp_status_use_case,
    get_list_guests_use_case,
    get_metrics_aggregator,
    get_session_manager,
    require_session_user,
)
from guestnama.application.services.metrics_aggregator import MetricsAggregator
from guestnama.application.use_cases.add_guest import AddGuestUseCase
from guestnama.application.use_cases.cycle_rsvp_status import CycleRsvpStatusUseCase
from guestnama.application.use_cases.list_guests import ListGuestsUseCase
from guestnama.domain.entities.user import SessionUser
from guestnama.domain.exceptions import StorageError
from guestnama.infrastructure.security.password_hasher import PasswordHasher
from guestnama.main import app


USER = SessionUser(
    id="user-1",
    name="Ayesha",
    phone="3001234567",
    role="USER",
    created_at="2024-01-01T00:00:00.000Z",
)


def _seeded_storage() -> FakeStorage:
    storage = FakeStorage()
    storage.guests = [
        make_guest(guest_id="g1", men=2, women=1, rsvp_status="Confirmed"),
        make_guest(guest_id="g2", children=3),
    ]
    storage.finance = [
        make_finance_entry("f1", "Income", "1000"),
        make_finance_entry("f2", "Expense", "300"),
        make_finance_entry("f3", "Income", "200"),
    ]
    storage.tasks = [make_task("t1", True), make_task("t2", False), make_task("t3", False)]
    return storage


def test_dashboard_requires_session():
    storage = FakeStorage()
    manager = build_session_manager(storage)
    app.dependency_overrides[get_session_manager] = lambda: manager
    app.dependency_overrides[get_metrics_aggregator] = lambda: MetricsAggregator(event_records=storage)

    with TestClient(app) as client:
        response = client.get("/v1/dashboard/metrics")

    assert response.status_code == 401

    app.dependency_overrides.clear()


def test_dashboard_metrics_and_failed_refresh_keeps_snapshot():
    storage = _seeded_storage()
    aggregator = MetricsAggregator(event_records=storage)
    app.dependency_overrides[require_session_user] = lambda: USER
    app.dependency_overrides[get_metrics_aggregator] = lambda: aggregator

    client = TestClient(app)
    first = client.get("/v1/dashboard/metrics")
    storage.failures["get_tasks"] = StorageError("quota")
    refresh = client.post("/v1/dashboard/refresh")
    cached = client.get("/v1/dashboard/metrics")

    assert first.status_code == 200
    payload = first.json()
    assert payload["guest_stats"]["total_headcount"] == 6
    assert payload["finance_stats"]["balance"] == "900"
    assert payload["task_stats"]["percentage"] == 33
    assert refresh.status_code == 502
    assert cached.status_code == 200
    assert cached.json() == payload

    app.dependency_overrides.clear()


def test_guest_routes():
    storage = _seeded_storage()
    app.dependency_overrides[require_session_user] = lambda: USER
    app.dependency_overrides[get_list_guests_use_case] = lambda: ListGuestsUseCase(event_records=storage)
    app.dependency_overrides[get_add_guest_use_case] = lambda: AddGuestUseCase(
        event_records=storage,
        id_generator=SequentialIdGenerator("guest"),
    )
    app.dependency_overrides[get_cycle_rsvp_status_use_case] = lambda: CycleRsvpStatusUseCase(
        event_records=storage
    )

    client = TestClient(app)
    listed = client.get("/v1/guests", params={"category": "Children"})
    created = client.post("/v1/guests", json={"name": "Malik Family", "men": 1, "women": 1})
    cycled = client.post("/v1/guests/g1/rsvp/cycle")
    missing = client.post("/v1/guests/nope/rsvp/cycle")
    invalid = client.post("/v1/guests", json={"name": "X", "men": -1})

    assert listed.status_code == 200
    assert [guest["id"] for guest in listed.json()["guests"]] == ["g2"]
    assert listed.json()["totals"]["children"] == 3
    assert created.status_code == 201
    assert created.json()["total_persons"] == 2
    assert cycled.json()["rsvp_status"] == "Declined"
    assert missing.status_code == 404
    assert invalid.status_code == 422

    app.dependency_overrides.clear()


def _wait_until(predicate, timeout: float = 2.0) -> None:
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("condition not reached")
        time.sleep(0.01)


def test_periodic_invalidation_drops_cached_dashboard(monkeypatch, tmp_path):
    storage = _seeded_storage()
    storage.users.append(make_user(password_hash=PasswordHasher().hash("secret")))
    storage.valid_user_ids.add("user-1")
    monkeypatch.setenv("GUESTNAMA_SESSION_FILE", str(tmp_path / "session.json"))
    monkeypatch.setenv("GUESTNAMA_REVALIDATION_INTERVAL_SECONDS", "0.05")
    monkeypatch.setattr(deps, "get_storage_client", lambda: storage)
    deps.get_metrics_aggregator.cache_clear()
    deps.get_session_manager.cache_clear()
    manager = deps.get_session_manager()
    aggregator = deps.get_metrics_aggregator()

    with TestClient(app) as client:
        login = client.post("/v1/auth/login", json={"phone": "03001234567", "password": "secret"})
        metrics = client.get("/v1/dashboard/metrics")
        cached = aggregator.snapshot_for("user-1")

        storage.valid_user_ids.clear()
        _wait_until(lambda: not manager.is_authenticated)
        after = client.get("/v1/dashboard/metrics")

    assert login.status_code == 200
    assert metrics.status_code == 200
    assert cached is not None
    assert aggregator.snapshot is None
    assert after.status_code == 401

    deps.get_metrics_aggregator.cache_clear()
    deps.get_session_manager.cache_clear()
