from __future__ import annotations

from guestnama.application.ports.session_store_port import SessionStorePort
from guestnama.domain.entities.user import SessionUser


class InMemorySessionStore(SessionStorePort):
    def __init__(self, user: SessionUser | None = None):
        self._user = user

    def get(self) -> SessionUser | None:
        return self._user

    def set(self, user: SessionUser) -> None:
        self._user = user

    def clear(self) -> None:
        self._user = None
