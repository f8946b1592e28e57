"""
Health Check and Status Endpoints
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from config import config
from registry import registry
from sources import DataSourceManager
from store import SeriesStore
from .deps import get_series_store, get_source_manager

VERSION = "1.0.0"

health_router = APIRouter()


@health_router.get("/health")
async def health_check():
    """Simple health check endpoint."""
    return JSONResponse({
        "status": "healthy",
        "version": VERSION
    })


@health_router.get("/api/status")
async def api_status(
    store: SeriesStore = Depends(get_series_store),
    manager: DataSourceManager = Depends(get_source_manager),
):
    """Configuration and stored-data status."""
    indicators = {}
    for info in registry.all():
        doc = store.read(info.key)
        indicators[info.key] = {
            "name": info.name,
            "source": info.source,
            "sourceId": info.source_id,
            "region": info.region,
            "lastUpdated": doc.get('lastUpdated') if doc else None,
            "observations": len(doc['dates']) if doc else 0,
        }

    return JSONResponse({
        "status": "healthy",
        "version": VERSION,
        "config": {
            "fred_api_configured": bool(config.fred_api_key),
            "google_search_configured": config.google_search_configured,
            "admin_password_configured": bool(config.admin_password),
        },
        "data_sources": manager.available_sources(),
        "indicators": indicators,
    })
