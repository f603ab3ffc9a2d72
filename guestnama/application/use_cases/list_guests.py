from __future__ import annotations

from guestnama.application.dto.guests import ListGuestsInput, ListGuestsOutput
from guestnama.application.ports.storage_port import EventRecordsPort
from guestnama.domain.entities.user import SessionUser
from guestnama.domain.services.guest_directory import filter_guests, summarize_guests


class ListGuestsUseCase:
    def __init__(self, *, event_records: EventRecordsPort):
        self._event_records = event_records

    async def execute(self, *, user: SessionUser, command: ListGuestsInput) -> ListGuestsOutput:
        guests = await self._event_records.get_guests(user_id=user.id, role=user.role)
        filtered = filter_guests(
            guests,
            query=command.query.strip(),
            rsvp_status=command.rsvp_status,
            category=command.category,
        )
        return ListGuestsOutput(guests=filtered, totals=summarize_guests(filtered))
