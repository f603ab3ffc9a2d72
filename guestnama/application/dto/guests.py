from __future__ import annotations

from dataclasses import dataclass

from guestnama.domain.entities.guest import GuestRecord
from guestnama.domain.services.guest_directory import GuestCategory, GuestTotals


@dataclass(frozen=True)
class ListGuestsInput:
    query: str
    rsvp_status: str
    category: GuestCategory


@dataclass(frozen=True)
class ListGuestsOutput:
    guests: list[GuestRecord]
    totals: GuestTotals


@dataclass(frozen=True)
class AddGuestInput:
    name: str
    phone: str = ""
    city: str = ""
    vip_status: bool = False
    men: int = 0
    women: int = 0
    children: int = 0
    relationship: str = "Family"
    own_car: str = "No (Need Transport)"
    invited_by: str = ""
    rsvp_status: str = "Pending"
    invitation_required: bool = False
    invitation_sent: str = "Not Sent"
    notes: str = ""
    group: str = "Other"
    event_date: str = ""
