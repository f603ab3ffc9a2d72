from __future__ import annotations

from typing import Protocol

from guestnama.domain.entities.finance import FinanceEntry
from guestnama.domain.entities.guest import GuestRecord
from guestnama.domain.entities.task import TaskRecord
from guestnama.domain.entities.user import User, UserRole


class UserDirectoryPort(Protocol):
    async def get_users(self) -> list[User]:
        ...

    async def add_user(self, user: User) -> None:
        ...

    async def verify_session(self, *, user_id: str) -> bool:
        ...


class EventRecordsPort(Protocol):
    async def get_guests(self, *, user_id: str, role: UserRole) -> list[GuestRecord]:
        ...

    async def get_finance(self, *, user_id: str) -> list[FinanceEntry]:
        ...

    async def get_tasks(self, *, user_id: str) -> list[TaskRecord]:
        ...

    async def add_guest(self, guest: GuestRecord) -> None:
        ...

    async def delete_guest(self, *, guest_id: str) -> None:
        ...

    async def update_guest_status(self, *, guest_id: str, rsvp_status: str) -> None:
        ...


class StoragePort(UserDirectoryPort, EventRecordsPort, Protocol):
    pass
