"""
Shared dependencies for the API routers.

Stores and the source manager are built once from config; tests swap them
through app.dependency_overrides.
"""

from datetime import date
from functools import lru_cache

from fastapi import Depends

from config import config
from processing import DashboardState
from registry import registry
from sources import DataSourceManager
from store import EstimatesStore, NewsStore, SeriesStore


@lru_cache(maxsize=1)
def get_series_store() -> SeriesStore:
    return SeriesStore(config.data_dir)


@lru_cache(maxsize=1)
def get_estimates_store() -> EstimatesStore:
    return EstimatesStore(config.data_dir / 'estimates.json', max_entries=config.max_estimates)


@lru_cache(maxsize=1)
def get_news_store() -> NewsStore:
    return NewsStore(config.data_dir / 'sp500_news.json')


@lru_cache(maxsize=1)
def get_source_manager() -> DataSourceManager:
    return DataSourceManager(get_series_store())


def get_today() -> date:
    return date.today()


def get_dashboard_state(
    store: SeriesStore = Depends(get_series_store),
    today: date = Depends(get_today),
) -> DashboardState:
    """Fresh state for every request."""
    return DashboardState(
        store=store,
        indicators=registry.dashboard_indicators(),
        registry=registry,
        today=today,
    )
