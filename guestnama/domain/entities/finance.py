from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class FinanceEntry:
    id: str
    user_id: str
    type: str
    amount: Decimal
    description: str
    date: str
