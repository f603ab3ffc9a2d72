from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    phone: str
    password: str = Field(min_length=1)


class SignupRequest(BaseModel):
    name: str = Field(min_length=1)
    phone: str
    password: str = Field(min_length=1)


class SessionUserResponse(BaseModel):
    id: str
    name: str
    phone: str
    role: str
    created_at: str


class SessionResponse(BaseModel):
    is_authenticated: bool
    is_loading: bool
    user: SessionUserResponse | None


class LogoutResponse(BaseModel):
    ok: bool
