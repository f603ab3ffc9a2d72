from __future__ import annotations

from dataclasses import replace

from guestnama.application.ports.storage_port import EventRecordsPort
from guestnama.domain.entities.guest import GuestRecord
from guestnama.domain.entities.user import SessionUser
from guestnama.domain.exceptions import GuestNotFoundError
from guestnama.domain.services.guest_directory import next_rsvp_status


class CycleRsvpStatusUseCase:
    def __init__(self, *, event_records: EventRecordsPort):
        self._event_records = event_records

    async def execute(self, *, user: SessionUser, guest_id: str) -> GuestRecord:
        guests = await self._event_records.get_guests(user_id=user.id, role=user.role)
        guest = next((item for item in guests if item.id == guest_id), None)
        if guest is None:
            raise GuestNotFoundError("Guest not found.")

        updated = replace(guest, rsvp_status=next_rsvp_status(guest.rsvp_status))
        await self._event_records.update_guest_status(
            guest_id=guest_id,
            rsvp_status=updated.rsvp_status,
        )
        return updated
