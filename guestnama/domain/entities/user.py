from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


UserRole = Literal["USER", "ADMIN"]

DEFAULT_ROLE: UserRole = "USER"


@dataclass(frozen=True)
class User:
    id: str
    name: str
    phone: str
    role: UserRole
    password_hash: str
    created_at: str


@dataclass(frozen=True)
class SessionUser:
    id: str
    name: str
    phone: str
    role: UserRole
    created_at: str


def to_session_user(user: User) -> SessionUser:
    return SessionUser(
        id=user.id,
        name=user.name,
        phone=user.phone,
        role=user.role,
        created_at=user.created_at,
    )
