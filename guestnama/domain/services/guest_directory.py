from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from guestnama.domain.entities.guest import RSVP_STATUSES, GuestRecord


GuestCategory = Literal["All", "Men", "Women", "Children"]

ALL = "All"


@dataclass(frozen=True)
class GuestTotals:
    men: int
    women: int
    children: int
    total: int


def _matches_query(guest: GuestRecord, query: str) -> bool:
    if not query:
        return True
    needle = query.lower()
    return needle in guest.name.lower() or needle in guest.phone.lower()


def _matches_category(guest: GuestRecord, category: GuestCategory) -> bool:
    if category == "Men":
        return guest.men > 0
    if category == "Women":
        return guest.women > 0
    if category == "Children":
        return guest.children > 0
    return True


def filter_guests(
    guests: list[GuestRecord],
    *,
    query: str = "",
    rsvp_status: str = ALL,
    category: GuestCategory = "All",
) -> list[GuestRecord]:
    return [
        guest
        for guest in guests
        if _matches_query(guest, query)
        and (rsvp_status == ALL or guest.rsvp_status == rsvp_status)
        and _matches_category(guest, category)
    ]


def summarize_guests(guests: list[GuestRecord]) -> GuestTotals:
    return GuestTotals(
        men=sum(guest.men for guest in guests),
        women=sum(guest.women for guest in guests),
        children=sum(guest.children for guest in guests),
        total=sum(guest.total_persons for guest in guests),
    )


def next_rsvp_status(current: str) -> str:
    """Cycle Pending -> Confirmed -> Declined -> Pending.

    Statuses outside the cycle (legacy labels) restart at Pending.
    """
    if current not in RSVP_STATUSES:
        return RSVP_STATUSES[0]
    index = RSVP_STATUSES.index(current)
    return RSVP_STATUSES[(index + 1) % len(RSVP_STATUSES)]
