from __future__ import annotations

import logging

from guestnama.application.dto.guests import AddGuestInput
from guestnama.application.ports.id_generator_port import IdGeneratorPort
from guestnama.application.ports.storage_port import EventRecordsPort
from guestnama.domain.entities.guest import GuestRecord
from guestnama.domain.entities.user import SessionUser


logger = logging.getLogger(__name__)


class AddGuestUseCase:
    def __init__(self, *, event_records: EventRecordsPort, id_generator: IdGeneratorPort):
        self._event_records = event_records
        self._id_generator = id_generator

    async def execute(self, *, user: SessionUser, command: AddGuestInput) -> GuestRecord:
        name = command.name.strip()
        if not name:
            raise ValueError("name is required.")
        if min(command.men, command.women, command.children) < 0:
            raise ValueError("guest counts must not be negative.")

        guest = GuestRecord(
            id=self._id_generator.new_id(),
            user_id=user.id,
            name=name,
            phone=command.phone,
            city=command.city,
            vip_status=command.vip_status,
            men=command.men,
            women=command.women,
            children=command.children,
            total_persons=command.men + command.women + command.children,
            relationship=command.relationship,
            own_car=command.own_car,
            invited_by=command.invited_by,
            rsvp_status=command.rsvp_status,
            invitation_required=command.invitation_required,
            invitation_sent=command.invitation_sent,
            checked_in=False,
            notes=command.notes,
            group=command.group,
            event_date=command.event_date,
        )
        await self._event_records.add_guest(guest)
        logger.info("add_guest: created guest_id=%s user_id=%s", guest.id, user.id)
        return guest
