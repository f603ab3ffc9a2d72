from __future__ import annotations

import asyncio
import logging

from guestnama.application.ports.storage_port import EventRecordsPort
from guestnama.domain.entities.dashboard_metrics import DashboardMetrics
from guestnama.domain.entities.user import UserRole
from guestnama.domain.exceptions import MetricsUnavailableError, StorageError
from guestnama.domain.services.dashboard_metrics import build_dashboard_metrics


logger = logging.getLogger(__name__)


class MetricsAggregator:
    def __init__(self, *, event_records: EventRecordsPort):
        self._event_records = event_records
        self._snapshot: DashboardMetrics | None = None
        self._snapshot_user_id: str | None = None
        self._generation = 0

    @property
    def snapshot(self) -> DashboardMetrics | None:
        return self._snapshot

    def snapshot_for(self, user_id: str) -> DashboardMetrics | None:
        if self._snapshot_user_id != user_id:
            return None
        return self._snapshot

    def reset(self) -> None:
        self._generation += 1
        self._snapshot = None
        self._snapshot_user_id = None

    async def compute_metrics(self, *, user_id: str, role: UserRole) -> DashboardMetrics:
        generation = self._generation
        try:
            guests, finance, tasks = await asyncio.gather(
                self._event_records.get_guests(user_id=user_id, role=role),
                self._event_records.get_finance(user_id=user_id),
                self._event_records.get_tasks(user_id=user_id),
            )
        except StorageError as exc:
            logger.exception("metrics_aggregator: refresh_failed user_id=%s", user_id)
            raise MetricsUnavailableError("Could not load dashboard records.") from exc

        metrics = build_dashboard_metrics(guests=guests, finance=finance, tasks=tasks)
        # A reset while the fetches were in flight means the result is stale.
        if generation == self._generation:
            self._snapshot = metrics
            self._snapshot_user_id = user_id
        logger.info(
            "metrics_aggregator: refreshed user_id=%s guests=%s finance=%s tasks=%s",
            user_id,
            len(guests),
            len(finance),
            len(tasks),
        )
        return metrics
