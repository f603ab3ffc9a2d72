from __future__ import annotations

from dataclasses import dataclass


RSVP_STATUSES = ("Pending", "Confirmed", "Declined")

# Older guest screens also wrote "Accepted", "Chances" and "Maybe".
CONFIRMED_RSVP_STATUSES = frozenset({"Confirmed", "Accepted"})

INVITATION_SENT_STATUSES = frozenset({"Sent", "Delivered", "Seen"})


@dataclass(frozen=True)
class GuestRecord:
    id: str
    user_id: str
    name: str
    phone: str
    city: str
    vip_status: bool
    men: int
    women: int
    children: int
    total_persons: int
    relationship: str
    own_car: str
    invited_by: str
    rsvp_status: str
    invitation_required: bool
    invitation_sent: str
    checked_in: bool
    notes: str
    group: str
    event_date: str
