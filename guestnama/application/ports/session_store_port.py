from __future__ import annotations

from typing import Protocol

from guestnama.domain.entities.user import SessionUser


class SessionStorePort(Protocol):
    def get(self) -> SessionUser | None:
        ...

    def set(self, user: SessionUser) -> None:
        ...

    def clear(self) -> None:
        ...
