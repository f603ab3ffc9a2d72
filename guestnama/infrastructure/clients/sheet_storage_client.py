from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

import httpx

from guestnama.application.ports.storage_port import StoragePort
from guestnama.domain.entities.finance import FinanceEntry
from guestnama.domain.entities.guest import GuestRecord
from guestnama.domain.entities.task import TaskRecord
from guestnama.domain.entities.user import User, UserRole
from guestnama.domain.exceptions import StorageError
from guestnama.infrastructure.mappers.storage_mapper import (
    map_guest_to_row,
    map_row_to_finance_entry,
    map_row_to_guest,
    map_row_to_task,
    map_row_to_user,
    map_user_to_row,
)


logger = logging.getLogger(__name__)

T = TypeVar("T")


class SheetStorageClient(StoragePort):
    """JSON client for the spreadsheet web app that owns every record.

    Reads are ``GET <backend_url>?action=<name>&...`` and writes are
    ``POST <backend_url>`` with ``{"action": <name>, "data": {...}}``. The web
    app answers either with the bare value or with a
    ``{"status": ..., "data": ..., "message": ...}`` envelope.
    """

    def __init__(
        self,
        *,
        backend_url: str,
        timeout_seconds: float,
        client: httpx.AsyncClient | None = None,
    ):
        if not backend_url:
            raise ValueError("backend_url is required.")
        self._backend_url = backend_url
        # The web app answers through a redirect to its content host.
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds, follow_redirects=True)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_users(self) -> list[User]:
        return await self._get_records("getUsers", map_row_to_user)

    async def add_user(self, user: User) -> None:
        await self._post("addUser", map_user_to_row(user))

    async def verify_session(self, *, user_id: str) -> bool:
        data = await self._get("verifySession", userId=user_id)
        if isinstance(data, bool):
            return data
        if isinstance(data, dict) and isinstance(data.get("valid"), bool):
            return data["valid"]
        raise StorageError("verifySession returned an unexpected payload.")

    async def get_guests(self, *, user_id: str, role: UserRole) -> list[GuestRecord]:
        return await self._get_records("getGuests", map_row_to_guest, userId=user_id, role=role)

    async def get_finance(self, *, user_id: str) -> list[FinanceEntry]:
        return await self._get_records("getFinance", map_row_to_finance_entry, userId=user_id)

    async def get_tasks(self, *, user_id: str) -> list[TaskRecord]:
        return await self._get_records("getTasks", map_row_to_task, userId=user_id)

    async def add_guest(self, guest: GuestRecord) -> None:
        await self._post("addGuest", map_guest_to_row(guest))

    async def delete_guest(self, *, guest_id: str) -> None:
        await self._post("deleteGuest", {"id": guest_id})

    async def update_guest_status(self, *, guest_id: str, rsvp_status: str) -> None:
        await self._post("updateGuestStatus", {"id": guest_id, "rsvpStatus": rsvp_status})

    async def _get_records(
        self,
        action: str,
        mapper: Callable[[dict[str, Any]], T],
        **params: str,
    ) -> list[T]:
        rows = await self._get_rows(action, **params)
        try:
            return [mapper(row) for row in rows]
        except (KeyError, TypeError, ValueError) as exc:
            raise StorageError(f"{action} returned a malformed row: {exc!r}") from exc

    async def _get_rows(self, action: str, **params: str) -> list[dict[str, Any]]:
        data = await self._get(action, **params)
        if data is None:
            return []
        if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
            raise StorageError(f"{action} returned an unexpected payload.")
        logger.debug("sheet_storage_client: rows action=%s count=%s", action, len(data))
        return data

    async def _get(self, action: str, **params: str) -> Any:
        try:
            response = await self._client.get(self._backend_url, params={"action": action, **params})
        except httpx.HTTPError as exc:
            raise StorageError(f"{action} request failed: {exc}") from exc
        return self._decode(action, response)

    async def _post(self, action: str, data: dict[str, Any]) -> Any:
        try:
            response = await self._client.post(
                self._backend_url,
                json={"action": action, "data": data},
            )
        except httpx.HTTPError as exc:
            raise StorageError(f"{action} request failed: {exc}") from exc
        return self._decode(action, response)

    def _decode(self, action: str, response: httpx.Response) -> Any:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise StorageError(f"{action} failed with status {response.status_code}.") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise StorageError(f"{action} returned invalid JSON.") from exc

        if isinstance(payload, dict) and "status" in payload:
            if payload["status"] != "success":
                message = payload.get("message") or "unknown error"
                logger.warning("sheet_storage_client: action_failed action=%s message=%s", action, message)
                raise StorageError(f"{action} failed: {message}")
            return payload.get("data")
        return payload
