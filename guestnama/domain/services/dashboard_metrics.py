from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from guestnama.domain.entities.dashboard_metrics import (
    DashboardMetrics,
    FinanceStats,
    GuestStats,
    TaskStats,
)
from guestnama.domain.entities.finance import FinanceEntry
from guestnama.domain.entities.guest import (
    CONFIRMED_RSVP_STATUSES,
    INVITATION_SENT_STATUSES,
    GuestRecord,
)
from guestnama.domain.entities.task import TaskRecord


def percentage(part: int, whole: int) -> int:
    if whole <= 0:
        return 0
    ratio = Decimal(part) * Decimal("100") / Decimal(whole)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def build_guest_stats(guests: list[GuestRecord]) -> GuestStats:
    men = sum(guest.men for guest in guests)
    women = sum(guest.women for guest in guests)
    children = sum(guest.children for guest in guests)

    invitation_needed = [guest for guest in guests if guest.invitation_required]
    invitation_sent = [
        guest for guest in invitation_needed if guest.invitation_sent in INVITATION_SENT_STATUSES
    ]

    return GuestStats(
        total=len(guests),
        confirmed=sum(1 for guest in guests if guest.rsvp_status in CONFIRMED_RSVP_STATUSES),
        checked_in=sum(1 for guest in guests if guest.checked_in),
        men=men,
        women=women,
        children=children,
        total_headcount=men + women + children,
        invitation_needed=len(invitation_needed),
        invitation_sent_count=len(invitation_sent),
    )


def build_finance_stats(entries: list[FinanceEntry]) -> FinanceStats:
    income = Decimal("0")
    expenses = Decimal("0")
    for entry in entries:
        if entry.type == "Income":
            income += entry.amount
        elif entry.type == "Expense":
            expenses += entry.amount
    return FinanceStats(income=income, expenses=expenses, balance=income - expenses)


def build_task_stats(tasks: list[TaskRecord]) -> TaskStats:
    completed = sum(1 for task in tasks if task.is_completed)
    return TaskStats(
        total=len(tasks),
        completed=completed,
        percentage=percentage(completed, len(tasks)),
    )


def build_dashboard_metrics(
    *,
    guests: list[GuestRecord],
    finance: list[FinanceEntry],
    tasks: list[TaskRecord],
) -> DashboardMetrics:
    guest_stats = build_guest_stats(guests)
    return DashboardMetrics(
        guest_stats=guest_stats,
        finance_stats=build_finance_stats(finance),
        task_stats=build_task_stats(tasks),
        rsvp_progress=percentage(guest_stats.confirmed, guest_stats.total),
        invitation_progress=percentage(
            guest_stats.invitation_sent_count,
            guest_stats.invitation_needed,
        ),
    )
