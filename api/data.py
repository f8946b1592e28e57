"""
Data Endpoints

Momentum and growth views, the latest-value snapshot, raw stored series, and
provider refreshes. The fixed paths are registered before /api/data/{indicator}.
"""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from config import MOMENTUM_PERIODS, SERIES_RANGES, config
from processing import (
    DashboardState,
    build_growth,
    build_momentum,
    build_snapshot,
    filter_data_by_dates,
    range_start_date,
)
from registry import registry
from sources import DataSourceManager
from store import SeriesStore
from .deps import get_dashboard_state, get_series_store, get_source_manager, get_today


logger = logging.getLogger(__name__)

data_router = APIRouter()


def _require_indicator(indicator: str) -> None:
    if indicator not in registry:
        raise HTTPException(status_code=404, detail="Invalid indicator")


@data_router.get("/api/data/momentum")
async def momentum(
    period: str = Query(config.default_momentum_period),
    state: DashboardState = Depends(get_dashboard_state),
):
    """Indicators rebased to 100 at the baseline period, aligned to common dates."""
    if period not in MOMENTUM_PERIODS:
        raise HTTPException(
            status_code=422,
            detail=f"Invalid period '{period}'. Expected one of: {', '.join(MOMENTUM_PERIODS)}",
        )
    return JSONResponse(build_momentum(state, period))


@data_router.get("/api/data/growth")
async def growth(
    months: Optional[int] = Query(None, ge=1, le=600),
    state: DashboardState = Depends(get_dashboard_state),
):
    """Month-over-month growth, each indicator cut to its own trailing window."""
    window = months or config.growth_window_months
    return JSONResponse(build_growth(state, window))


@data_router.get("/api/data/snapshot")
async def snapshot(state: DashboardState = Depends(get_dashboard_state)):
    """Latest values with last-month and month-to-date growth."""
    return JSONResponse(build_snapshot(state))


@data_router.get("/api/data/{indicator}")
async def read_indicator(
    indicator: str,
    range_key: Optional[str] = Query(None, alias="range"),
    store: SeriesStore = Depends(get_series_store),
    today: date = Depends(get_today),
):
    """Stored series for one indicator, optionally limited to a display range."""
    _require_indicator(indicator)

    if range_key is not None and range_key not in SERIES_RANGES:
        raise HTTPException(
            status_code=422,
            detail=f"Invalid range '{range_key}'. Expected one of: {', '.join(SERIES_RANGES)}",
        )

    doc = store.read(indicator)
    if doc is None:
        return JSONResponse({
            "success": False,
            "message": "No local data available",
            "source": "none",
        })

    if range_key is not None:
        start = range_start_date(range_key, today).isoformat()
        dates, values = filter_data_by_dates(doc['dates'], doc['values'], start_date=start)
        doc = {**doc, 'dates': dates, 'values': values}

    return JSONResponse({"success": True, "data": doc, "source": "local"})


@data_router.post("/api/data/{indicator}/refresh")
async def refresh_indicator(
    indicator: str,
    manager: DataSourceManager = Depends(get_source_manager),
):
    """Fetch an indicator from its provider and overwrite the stored file."""
    _require_indicator(indicator)
    info = registry.get(indicator)

    result = await manager.refresh(indicator)
    if not result.ok:
        raise HTTPException(status_code=502, detail=result.error)

    return JSONResponse({
        "success": True,
        "data": result.saved,
        "source": "api",
        "message": f"Data fetched from {info.source.upper()} and saved locally",
    })
