from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TaskRecord:
    id: str
    user_id: str
    title: str
    is_completed: bool
