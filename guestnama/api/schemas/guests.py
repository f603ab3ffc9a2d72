from __future__ import annotations

from pydantic import BaseModel, Field


class GuestResponse(BaseModel):
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


class GuestTotalsResponse(BaseModel):
    men: int
    women: int
    children: int
    total: int


class GuestListResponse(BaseModel):
    guests: list[GuestResponse]
    totals: GuestTotalsResponse


class AddGuestRequest(BaseModel):
    name: str = Field(min_length=1)
    phone: str = ""
    city: str = ""
    vip_status: bool = False
    men: int = Field(default=0, ge=0)
    women: int = Field(default=0, ge=0)
    children: int = Field(default=0, ge=0)
    relationship: str = "Family"
    own_car: str = "No (Need Transport)"
    invited_by: str = ""
    rsvp_status: str = "Pending"
    invitation_required: bool = False
    invitation_sent: str = "Not Sent"
    notes: str = ""
    group: str = "Other"
    event_date: str = ""
