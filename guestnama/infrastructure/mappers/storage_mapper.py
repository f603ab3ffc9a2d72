from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from guestnama.domain.entities.finance import FinanceEntry
from guestnama.domain.entities.guest import GuestRecord
from guestnama.domain.entities.task import TaskRecord
from guestnama.domain.entities.user import SessionUser, User, UserRole


_TRUE_STRINGS = {"true", "yes", "1"}


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    # Sheets hand numeric cells back as floats (3001234567.0).
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _as_decimal(value: Any) -> Decimal:
    if value is None or isinstance(value, bool):
        return Decimal("0")
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation:
        return Decimal("0")
    if not result.is_finite():
        return Decimal("0")
    return result


def _as_count(value: Any) -> int:
    return max(int(_as_decimal(value)), 0)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _as_role(value: Any) -> UserRole:
    return "ADMIN" if _as_str(value).strip().upper() == "ADMIN" else "USER"


def map_row_to_user(row: Mapping[str, Any]) -> User:
    return User(
        id=_as_str(row["id"]),
        name=_as_str(row.get("name")),
        phone=_as_str(row.get("phone")),
        role=_as_role(row.get("role")),
        password_hash=_as_str(row.get("passwordHash")),
        created_at=_as_str(row.get("createdAt")),
    )


def map_user_to_row(user: User) -> dict[str, Any]:
    return {
        "id": user.id,
        "name": user.name,
        "phone": user.phone,
        "role": user.role,
        "passwordHash": user.password_hash,
        "createdAt": user.created_at,
    }


def map_row_to_session_user(row: Mapping[str, Any]) -> SessionUser:
    return SessionUser(
        id=_as_str(row["id"]),
        name=_as_str(row.get("name")),
        phone=_as_str(row.get("phone")),
        role=_as_role(row.get("role")),
        created_at=_as_str(row.get("createdAt")),
    )


def map_session_user_to_row(user: SessionUser) -> dict[str, Any]:
    return {
        "id": user.id,
        "name": user.name,
        "phone": user.phone,
        "role": user.role,
        "createdAt": user.created_at,
    }


def map_row_to_guest(row: Mapping[str, Any]) -> GuestRecord:
    men = _as_count(row.get("men"))
    women = _as_count(row.get("women"))
    children = _as_count(row.get("children"))
    total_persons = row.get("totalPersons")
    return GuestRecord(
        id=_as_str(row["id"]),
        user_id=_as_str(row.get("userId")),
        name=_as_str(row.get("name")),
        phone=_as_str(row.get("phone")),
        city=_as_str(row.get("city")),
        vip_status=_as_bool(row.get("vipStatus")),
        men=men,
        women=women,
        children=children,
        total_persons=(
            _as_count(total_persons) if total_persons not in (None, "") else men + women + children
        ),
        relationship=_as_str(row.get("relationship")),
        own_car=_as_str(row.get("ownCar")),
        invited_by=_as_str(row.get("invitedBy")),
        rsvp_status=_as_str(row.get("rsvpStatus")) or "Pending",
        invitation_required=_as_bool(row.get("invitationRequired")),
        invitation_sent=_as_str(row.get("invitationSent")) or "Not Sent",
        checked_in=_as_bool(row.get("checkedIn")),
        notes=_as_str(row.get("notes")),
        group=_as_str(row.get("group")) or "Other",
        event_date=_as_str(row.get("eventDate")),
    )


def map_guest_to_row(guest: GuestRecord) -> dict[str, Any]:
    return {
        "id": guest.id,
        "userId": guest.user_id,
        "name": guest.name,
        "phone": guest.phone,
        "city": guest.city,
        "vipStatus": guest.vip_status,
        "men": guest.men,
        "women": guest.women,
        "children": guest.children,
        "totalPersons": guest.total_persons,
        "relationship": guest.relationship,
        "ownCar": guest.own_car,
        "invitedBy": guest.invited_by,
        "rsvpStatus": guest.rsvp_status,
        "invitationRequired": guest.invitation_required,
        "invitationSent": guest.invitation_sent,
        "checkedIn": guest.checked_in,
        "notes": guest.notes,
        "group": guest.group,
        "eventDate": guest.event_date,
    }


def map_row_to_finance_entry(row: Mapping[str, Any]) -> FinanceEntry:
    return FinanceEntry(
        id=_as_str(row["id"]),
        user_id=_as_str(row.get("userId")),
        type=_as_str(row.get("type")).strip(),
        amount=_as_decimal(row.get("amount")),
        description=_as_str(row.get("description")),
        date=_as_str(row.get("date")),
    )


def map_row_to_task(row: Mapping[str, Any]) -> TaskRecord:
    return TaskRecord(
        id=_as_str(row["id"]),
        user_id=_as_str(row.get("userId")),
        title=_as_str(row.get("title")),
        is_completed=_as_bool(row.get("isCompleted")),
    )
