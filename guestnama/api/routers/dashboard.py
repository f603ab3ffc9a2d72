from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from guestnama.api.deps import get_metrics_aggregator, require_session_user
from guestnama.api.schemas.dashboard import DashboardMetricsResponse
from guestnama.application.services.metrics_aggregator import MetricsAggregator
from guestnama.domain.entities.user import SessionUser
from guestnama.domain.exceptions import MetricsUnavailableError


router = APIRouter()


@router.get("/v1/dashboard/metrics", response_model=DashboardMetricsResponse)
async def get_dashboard_metrics(
    user: SessionUser = Depends(require_session_user),
    metrics_aggregator: MetricsAggregator = Depends(get_metrics_aggregator),
):
    metrics = metrics_aggregator.snapshot_for(user.id)
    if metrics is None:
        try:
            metrics = await metrics_aggregator.compute_metrics(user_id=user.id, role=user.role)
        except MetricsUnavailableError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
    return DashboardMetricsResponse.model_validate(asdict(metrics))


@router.post("/v1/dashboard/refresh", response_model=DashboardMetricsResponse)
async def refresh_dashboard_metrics(
    user: SessionUser = Depends(require_session_user),
    metrics_aggregator: MetricsAggregator = Depends(get_metrics_aggregator),
):
    try:
        metrics = await metrics_aggregator.compute_metrics(user_id=user.id, role=user.role)
    except MetricsUnavailableError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return DashboardMetricsResponse.model_validate(asdict(metrics))
