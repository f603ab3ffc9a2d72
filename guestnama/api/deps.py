from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, HTTPException

from guestnama.application.services.metrics_aggregator import MetricsAggregator
from guestnama.application.services.session_manager import SessionManager
from guestnama.application.use_cases.add_guest import AddGuestUseCase
from guestnama.application.use_cases.cycle_rsvp_status import CycleRsvpStatusUseCase
from guestnama.application.use_cases.delete_guest import DeleteGuestUseCase
from guestnama.application.use_cases.list_guests import ListGuestsUseCase
from guestnama.application.use_cases.login_local import LoginLocalUseCase
from guestnama.application.use_cases.register_user import RegisterUserUseCase
from guestnama.domain.entities.user import SessionUser
from guestnama.infrastructure.clients.sheet_storage_client import SheetStorageClient
from guestnama.infrastructure.security.id_generator import UuidGenerator
from guestnama.infrastructure.security.password_hasher import PasswordHasher
from guestnama.infrastructure.session.file_session_store import FileSessionStore
from guestnama.shared.config import get_settings


@lru_cache(maxsize=1)
def get_storage_client() -> SheetStorageClient:
    settings = get_settings()
    return SheetStorageClient(
        backend_url=settings.backend_url,
        timeout_seconds=settings.request_timeout_seconds,
    )


@lru_cache(maxsize=1)
def _get_password_hasher() -> PasswordHasher:
    return PasswordHasher()


@lru_cache(maxsize=1)
def _get_id_generator() -> UuidGenerator:
    return UuidGenerator()


@lru_cache(maxsize=1)
def get_metrics_aggregator() -> MetricsAggregator:
    return MetricsAggregator(event_records=get_storage_client())


@lru_cache(maxsize=1)
def get_session_manager() -> SessionManager:
    settings = get_settings()
    storage = get_storage_client()
    manager = SessionManager(
        login_use_case=LoginLocalUseCase(
            user_directory=storage,
            password_hasher=_get_password_hasher(),
        ),
        register_user_use_case=RegisterUserUseCase(
            user_directory=storage,
            password_hasher=_get_password_hasher(),
            id_generator=_get_id_generator(),
        ),
        user_directory=storage,
        session_store=FileSessionStore(settings.session_file),
        revalidation_interval_seconds=settings.revalidation_interval_seconds,
    )
    manager.add_invalidation_listener(get_metrics_aggregator().reset)
    return manager


def get_list_guests_use_case() -> ListGuestsUseCase:
    return ListGuestsUseCase(event_records=get_storage_client())


def get_add_guest_use_case() -> AddGuestUseCase:
    return AddGuestUseCase(event_records=get_storage_client(), id_generator=_get_id_generator())


def get_delete_guest_use_case() -> DeleteGuestUseCase:
    return DeleteGuestUseCase(event_records=get_storage_client())


def get_cycle_rsvp_status_use_case() -> CycleRsvpStatusUseCase:
    return CycleRsvpStatusUseCase(event_records=get_storage_client())


def require_session_user(
    session_manager: SessionManager = Depends(get_session_manager),
) -> SessionUser:
    user = session_manager.user
    if user is None:
        raise HTTPException(status_code=401, detail="Not authenticated.")
    return user
