from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class GuestStats:
    total: int
    confirmed: int
    checked_in: int
    men: int
    women: int
    children: int
    total_headcount: int
    invitation_needed: int
    invitation_sent_count: int


@dataclass(frozen=True)
class FinanceStats:
    income: Decimal
    expenses: Decimal
    balance: Decimal


@dataclass(frozen=True)
class TaskStats:
    total: int
    completed: int
    percentage: int


@dataclass(frozen=True)
class DashboardMetrics:
    guest_stats: GuestStats
    finance_stats: FinanceStats
    task_stats: TaskStats
    rsvp_progress: int
    invitation_progress: int
