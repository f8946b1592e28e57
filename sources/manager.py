"""
Data Source Manager - Routes indicators to their provider and refreshes the store.

Indicators are refreshed one at a time with a pause between requests;
FRED and Yahoo both throttle bursts.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

from .base import DataSource, SeriesData
from .fred import FREDSource
from .yahoo import YahooSource
from config import config
from registry import IndicatorInfo, IndicatorRegistry, registry as default_registry
from store import SeriesStore


logger = logging.getLogger(__name__)


class UnknownIndicatorError(KeyError):
    """The indicator key is not in the registry."""


@dataclass
class RefreshResult:
    """Outcome of refreshing one indicator."""

    indicator: str
    saved: Optional[dict] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.saved is not None


class DataSourceManager:
    """
    Resolves indicators to data sources and writes fetched series to the store.
    """

    def __init__(
        self,
        store: SeriesStore,
        sources: Optional[List[DataSource]] = None,
        registry: Optional[IndicatorRegistry] = None,
        delay_seconds: Optional[float] = None,
    ):
        self.store = store
        self.registry = registry or default_registry
        self.delay_seconds = config.refresh_delay_seconds if delay_seconds is None else delay_seconds
        self._sources: List[DataSource] = sources if sources is not None else [FREDSource(), YahooSource()]

        for source in self._sources:
            logger.info("%s: %s", source.name, 'available' if source.available else 'not available')

    def get_source(self, source_type: str) -> Optional[DataSource]:
        """Find the data source that handles a provider type."""
        for source in self._sources:
            if source.supports(source_type):
                return source
        return None

    def _resolve(self, indicator: str) -> IndicatorInfo:
        info = self.registry.get(indicator)
        if info is None:
            raise UnknownIndicatorError(indicator)
        return info

    def _save(self, info: IndicatorInfo, result: SeriesData) -> RefreshResult:
        if not result.is_valid:
            logger.error("Error fetching %s: %s", info.key, result.error)
            return RefreshResult(info.key, error=result.error or f"No data returned for {info.key}")

        saved = self.store.save(info, result.dates, result.values)
        logger.info("%s updated (%d data points, latest %s = %s)",
                    info.name, len(result.dates), result.latest_date, result.latest)
        return RefreshResult(info.key, saved=saved)

    async def refresh(self, indicator: str) -> RefreshResult:
        """
        Fetch one indicator from its provider and overwrite its stored file.

        Raises:
            UnknownIndicatorError: indicator is not registered
        """
        info = self._resolve(indicator)
        source = self.get_source(info.source)
        if source is None:
            return RefreshResult(indicator, error=f"Unknown data source type: {info.source}")

        logger.info("Fetching %s from %s...", info.name, source.name)
        result = await source.fetch(info.source_id)
        return self._save(info, result)

    def refresh_sync(self, indicator: str) -> RefreshResult:
        """Blocking version of refresh."""
        info = self._resolve(indicator)
        source = self.get_source(info.source)
        if source is None:
            return RefreshResult(indicator, error=f"Unknown data source type: {info.source}")

        logger.info("Fetching %s from %s...", info.name, source.name)
        result = source.fetch_sync(info.source_id)
        return self._save(info, result)

    async def refresh_many(self, indicators: List[str]) -> Dict[str, RefreshResult]:
        """Refresh indicators sequentially, pausing between requests."""
        results = {}
        for i, indicator in enumerate(indicators):
            results[indicator] = await self.refresh(indicator)
            if self.delay_seconds and i < len(indicators) - 1:
                await asyncio.sleep(self.delay_seconds)
        return results

    def refresh_many_sync(self, indicators: List[str]) -> Dict[str, RefreshResult]:
        """Blocking version of refresh_many."""
        results = {}
        for i, indicator in enumerate(indicators):
            results[indicator] = self.refresh_sync(indicator)
            if self.delay_seconds and i < len(indicators) - 1:
                logger.info("Waiting %.0f seconds before next request...", self.delay_seconds)
                time.sleep(self.delay_seconds)
        return results

    def available_sources(self) -> dict:
        """Get status of all registered data sources."""
        return {source.name: source.available for source in self._sources}
