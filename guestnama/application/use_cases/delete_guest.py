from __future__ import annotations

import logging

from guestnama.application.ports.storage_port import EventRecordsPort


logger = logging.getLogger(__name__)


class DeleteGuestUseCase:
    def __init__(self, *, event_records: EventRecordsPort):
        self._event_records = event_records

    async def execute(self, *, guest_id: str) -> None:
        await self._event_records.delete_guest(guest_id=guest_id)
        logger.info("delete_guest: deleted guest_id=%s", guest_id)
