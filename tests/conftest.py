"""Shared fixtures."""

from datetime import date
from typing import List, Optional

import pytest

from registry import IndicatorInfo, registry
from sources import DataSource, SeriesData
from store import SeriesStore


# Reference "today" for calendar-dependent tests:
#   1m baseline target -> 2024-01-31, end of last month -> 2024-02-29
TODAY = date(2024, 3, 15)


@pytest.fixture
def store(tmp_path):
    return SeriesStore(tmp_path / "data")


@pytest.fixture
def save_series(store):
    """Write a stored series for a registered indicator."""
    def _save(key: str, dates: List[str], values: List[float]) -> dict:
        return store.save(registry.get(key), dates, values)
    return _save


class FakeSource(DataSource):
    """In-memory source returning canned SeriesData per source id."""

    def __init__(self, source_type: str, results: Optional[dict] = None):
        self.source_type = source_type
        self.results = results or {}
        self.calls: List[str] = []

    @property
    def name(self) -> str:
        return f"Fake {self.source_type}"

    async def fetch(self, source_id, years=None):
        return self.fetch_sync(source_id, years)

    def fetch_sync(self, source_id, years=None):
        self.calls.append(source_id)
        return self.results.get(
            source_id,
            SeriesData.failed(source_id, f"No data for {source_id}"),
        )


@pytest.fixture
def fake_sources():
    return {
        'fred': FakeSource('fred'),
        'yahoo': FakeSource('yahoo'),
    }


def make_info(key: str = 'test', source: str = 'fred') -> IndicatorInfo:
    return IndicatorInfo(key=key, name=f"Test {key}", source=source, source_id=key.upper())
