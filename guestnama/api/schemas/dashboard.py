from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel


class GuestStatsResponse(BaseModel):
    total: int
    confirmed: int
    checked_in: int
    men: int
    women: int
    children: int
    total_headcount: int
    invitation_needed: int
    invitation_sent_count: int


class FinanceStatsResponse(BaseModel):
    income: Decimal
    expenses: Decimal
    balance: Decimal


class TaskStatsResponse(BaseModel):
    total: int
    completed: int
    percentage: int


class DashboardMetricsResponse(BaseModel):
    guest_stats: GuestStatsResponse
    finance_stats: FinanceStatsResponse
    task_stats: TaskStatsResponse
    rsvp_progress: int
    invitation_progress: int
