from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from guestnama.api.deps import get_metrics_aggregator, get_session_manager
from guestnama.api.schemas.auth import (
    LoginRequest,
    LogoutResponse,
    SessionResponse,
    SessionUserResponse,
    SignupRequest,
)
from guestnama.application.services.metrics_aggregator import MetricsAggregator
from guestnama.application.services.session_manager import SessionManager
from guestnama.domain.exceptions import StorageError


router = APIRouter()


def _session_response(session_manager: SessionManager) -> SessionResponse:
    state = session_manager.state
    return SessionResponse(
        is_authenticated=state.is_authenticated,
        is_loading=state.is_loading,
        user=SessionUserResponse(**asdict(state.user)) if state.user is not None else None,
    )


@router.post("/v1/auth/login", response_model=SessionResponse)
async def login(
    req: LoginRequest,
    session_manager: SessionManager = Depends(get_session_manager),
):
    try:
        ok = await session_manager.login(req.phone, req.password)
    except StorageError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    if not ok:
        raise HTTPException(status_code=401, detail="Invalid credentials.")
    return _session_response(session_manager)


@router.post("/v1/auth/signup", response_model=SessionResponse)
async def signup(
    req: SignupRequest,
    session_manager: SessionManager = Depends(get_session_manager),
):
    try:
        ok = await session_manager.signup(req.name, req.phone, req.password)
    except StorageError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    if not ok:
        raise HTTPException(status_code=409, detail="Phone is invalid or already registered.")
    return _session_response(session_manager)


@router.post("/v1/auth/logout", response_model=LogoutResponse)
async def logout(
    session_manager: SessionManager = Depends(get_session_manager),
    metrics_aggregator: MetricsAggregator = Depends(get_metrics_aggregator),
):
    session_manager.logout()
    metrics_aggregator.reset()
    return LogoutResponse(ok=True)


@router.get("/v1/auth/session", response_model=SessionResponse)
async def get_session(session_manager: SessionManager = Depends(get_session_manager)):
    return _session_response(session_manager)
