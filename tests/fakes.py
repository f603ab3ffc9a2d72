from __future__ import annotations

from decimal import Decimal

from guestnama.application.services.session_manager import SessionManager
from guestnama.application.use_cases.login_local import LoginLocalUseCase
from guestnama.application.use_cases.register_user import RegisterUserUseCase
from guestnama.domain.entities.finance import FinanceEntry
from guestnama.domain.entities.guest import GuestRecord
from guestnama.domain.entities.task import TaskRecord
from guestnama.domain.entities.user import User
from guestnama.infrastructure.session.memory_session_store import InMemorySessionStore


class FakeStorage:
    def __init__(self):
        self.users: list[User] = []
        self.guests: list[GuestRecord] = []
        self.finance: list[FinanceEntry] = []
        self.tasks: list[TaskRecord] = []
        self.valid_user_ids: set[str] = set()
        self.failures: dict[str, Exception] = {}
        self.calls: list[str] = []
        self.status_updates: list[tuple[str, str]] = []
        self.deleted_guest_ids: list[str] = []

    def _call(self, name: str) -> None:
        self.calls.append(name)
        failure = self.failures.get(name)
        if failure is not None:
            raise failure

    async def get_users(self) -> list[User]:
        self._call("get_users")
        return list(self.users)

    async def add_user(self, user: User) -> None:
        self._call("add_user")
        self.users.append(user)
        self.valid_user_ids.add(user.id)

    async def verify_session(self, *, user_id: str) -> bool:
        self._call("verify_session")
        return user_id in self.valid_user_ids

    async def get_guests(self, *, user_id: str, role: str) -> list[GuestRecord]:
        self._call("get_guests")
        if role == "ADMIN":
            return list(self.guests)
        return [guest for guest in self.guests if guest.user_id == user_id]

    async def get_finance(self, *, user_id: str) -> list[FinanceEntry]:
        self._call("get_finance")
        return [entry for entry in self.finance if entry.user_id == user_id]

    async def get_tasks(self, *, user_id: str) -> list[TaskRecord]:
        self._call("get_tasks")
        return [task for task in self.tasks if task.user_id == user_id]

    async def add_guest(self, guest: GuestRecord) -> None:
        self._call("add_guest")
        self.guests.append(guest)

    async def delete_guest(self, *, guest_id: str) -> None:
        self._call("delete_guest")
        self.deleted_guest_ids.append(guest_id)
        self.guests = [guest for guest in self.guests if guest.id != guest_id]

    async def update_guest_status(self, *, guest_id: str, rsvp_status: str) -> None:
        self._call("update_guest_status")
        self.status_updates.append((guest_id, rsvp_status))


class FakePasswordHasher:
    def hash(self, plain_password: str) -> str:
        return f"hashed::{plain_password}"


class SequentialIdGenerator:
    def __init__(self, prefix: str = "id"):
        self._prefix = prefix
        self._counter = 0

    def new_id(self) -> str:
        self._counter += 1
        return f"{self._prefix}-{self._counter}"


def make_user(
    *,
    user_id: str = "user-1",
    phone: str = "3001234567",
    password_hash: str = "hashed::secret",
    role: str = "USER",
) -> User:
    return User(
        id=user_id,
        name="Ayesha",
        phone=phone,
        role=role,
        password_hash=password_hash,
        created_at="2024-01-01T00:00:00.000Z",
    )


def make_guest(
    *,
    guest_id: str = "guest-1",
    user_id: str = "user-1",
    name: str = "Khan Family",
    phone: str = "03001112233",
    men: int = 0,
    women: int = 0,
    children: int = 0,
    rsvp_status: str = "Pending",
    invitation_required: bool = False,
    invitation_sent: str = "Not Sent",
    checked_in: bool = False,
) -> GuestRecord:
    return GuestRecord(
        id=guest_id,
        user_id=user_id,
        name=name,
        phone=phone,
        city="Lahore",
        vip_status=False,
        men=men,
        women=women,
        children=children,
        total_persons=men + women + children,
        relationship="Family",
        own_car="No (Need Transport)",
        invited_by="Bride",
        rsvp_status=rsvp_status,
        invitation_required=invitation_required,
        invitation_sent=invitation_sent,
        checked_in=checked_in,
        notes="",
        group="Family",
        event_date="2024-12-20",
    )


def make_finance_entry(entry_id: str, entry_type: str, amount: str, user_id: str = "user-1") -> FinanceEntry:
    return FinanceEntry(
        id=entry_id,
        user_id=user_id,
        type=entry_type,
        amount=Decimal(amount),
        description="",
        date="2024-12-01",
    )


def make_task(task_id: str, is_completed: bool, user_id: str = "user-1") -> TaskRecord:
    return TaskRecord(id=task_id, user_id=user_id, title=f"Task {task_id}", is_completed=is_completed)


def build_session_manager(
    storage,
    *,
    password_hasher=None,
    session_store=None,
    interval: float = 300.0,
) -> SessionManager:
    password_hasher = password_hasher if password_hasher is not None else FakePasswordHasher()
    return SessionManager(
        login_use_case=LoginLocalUseCase(user_directory=storage, password_hasher=password_hasher),
        register_user_use_case=RegisterUserUseCase(
            user_directory=storage,
            password_hasher=password_hasher,
            id_generator=SequentialIdGenerator(),
        ),
        user_directory=storage,
        session_store=session_store if session_store is not None else InMemorySessionStore(),
        revalidation_interval_seconds=interval,
    )
