from __future__ import annotations

from dataclasses import dataclass

from guestnama.domain.entities.user import SessionUser


@dataclass(frozen=True)
class LoginInput:
    phone: str
    password: str


@dataclass(frozen=True)
class SignupInput:
    name: str
    phone: str
    password: str


@dataclass(frozen=True)
class AuthState:
    user: SessionUser | None
    is_authenticated: bool
    is_loading: bool
