"""
Abstract interface for all data sources.

Makes it trivial to add new data sources - just implement the DataSource protocol.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, List


@dataclass
class SeriesData:
    """Result from fetching a data series."""

    id: str
    dates: List[str]
    values: List[float]
    info: dict = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        """Check if data was fetched successfully."""
        return self.error is None and len(self.dates) > 0 and len(self.values) > 0

    @property
    def latest(self) -> Optional[float]:
        """Get most recent value."""
        return self.values[-1] if self.values else None

    @property
    def latest_date(self) -> Optional[str]:
        """Get most recent date."""
        return self.dates[-1] if self.dates else None

    @classmethod
    def failed(cls, series_id: str, error: str) -> "SeriesData":
        return cls(id=series_id, dates=[], values=[], error=error)


class DataSource(ABC):
    """Abstract base class for data sources."""

    #: Provider type this source serves, as named in the indicator registry
    source_type: str = ''

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this data source."""
        pass

    @property
    def available(self) -> bool:
        """Whether the source is configured well enough to try a fetch."""
        return True

    def supports(self, source_type: str) -> bool:
        """Check if this source serves the given provider type."""
        return source_type == self.source_type

    @abstractmethod
    async def fetch(self, source_id: str, years: Optional[int] = None) -> SeriesData:
        """
        Fetch data for a single series.

        Args:
            source_id: Provider-side identifier (FRED series id, ticker symbol)
            years: Years of history to request (None for the source default)

        Returns:
            SeriesData with ascending dates, values, and metadata. Failures are
            reported through SeriesData.error, never raised.
        """
        pass

    @abstractmethod
    def fetch_sync(self, source_id: str, years: Optional[int] = None) -> SeriesData:
        """Blocking version of fetch, for scripts."""
        pass
