from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from demo_admin.api.dependencies import get_app_metrics, get_app_settings
from demo_admin.config import Settings
from demo_admin.observability.metrics import InMemoryMetrics


router = APIRouter(tags=["metrics"])


@router.get("/metrics", summary="Metrics snapshot", description="Counters, gauges and latency aggregates.")
def metrics(
    app_metrics: InMemoryMetrics = Depends(get_app_metrics),
    settings: Settings = Depends(get_app_settings),
) -> dict:
    if not settings.enable_metrics_endpoint:
        raise HTTPException(status_code=404, detail="Not found")
    return app_metrics.snapshot()
