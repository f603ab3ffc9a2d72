from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Query

from guestnama.api.deps import (
    get_add_guest_use_case,
    get_cycle_rsvp_status_use_case,
    get_delete_guest_use_case,
    get_list_guests_use_case,
    require_session_user,
)
from guestnama.api.schemas.guests import (
    AddGuestRequest,
    GuestListResponse,
    GuestResponse,
    GuestTotalsResponse,
)
from guestnama.application.dto.guests import AddGuestInput, ListGuestsInput
from guestnama.application.use_cases.add_guest import AddGuestUseCase
from guestnama.application.use_cases.cycle_rsvp_status import CycleRsvpStatusUseCase
from guestnama.application.use_cases.delete_guest import DeleteGuestUseCase
from guestnama.application.use_cases.list_guests import ListGuestsUseCase
from guestnama.domain.entities.user import SessionUser
from guestnama.domain.exceptions import GuestNotFoundError, StorageError
from guestnama.domain.services.guest_directory import GuestCategory


router = APIRouter()


@router.get("/v1/guests", response_model=GuestListResponse)
async def list_guests(
    q: str = Query(default=""),
    status: str = Query(default="All"),
    category: GuestCategory = Query(default="All"),
    user: SessionUser = Depends(require_session_user),
    use_case: ListGuestsUseCase = Depends(get_list_guests_use_case),
):
    try:
        output = await use_case.execute(
            user=user,
            command=ListGuestsInput(query=q, rsvp_status=status, category=category),
        )
    except StorageError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return GuestListResponse(
        guests=[GuestResponse(**asdict(guest)) for guest in output.guests],
        totals=GuestTotalsResponse(**asdict(output.totals)),
    )


@router.post("/v1/guests", response_model=GuestResponse, status_code=201)
async def add_guest(
    req: AddGuestRequest,
    user: SessionUser = Depends(require_session_user),
    use_case: AddGuestUseCase = Depends(get_add_guest_use_case),
):
    try:
        guest = await use_case.execute(user=user, command=AddGuestInput(**req.model_dump()))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except StorageError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return GuestResponse(**asdict(guest))


@router.delete("/v1/guests/{guest_id}", status_code=204)
async def delete_guest(
    guest_id: str,
    _user: SessionUser = Depends(require_session_user),
    use_case: DeleteGuestUseCase = Depends(get_delete_guest_use_case),
):
    try:
        await use_case.execute(guest_id=guest_id)
    except StorageError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@router.post("/v1/guests/{guest_id}/rsvp/cycle", response_model=GuestResponse)
async def cycle_rsvp_status(
    guest_id: str,
    user: SessionUser = Depends(require_session_user),
    use_case: CycleRsvpStatusUseCase = Depends(get_cycle_rsvp_status_use_case),
):
    try:
        guest = await use_case.execute(user=user, guest_id=guest_id)
    except GuestNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except StorageError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return GuestResponse(**asdict(guest))
