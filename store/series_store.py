"""
Series Store - one JSON file per indicator.

File shape:
    {
      "lastUpdated": "2025-01-31T21:00:00.000000+00:00",
      "indicator": "sp500",
      "name": "S&P 500 Index",
      "source": "yahoo",
      "sourceId": "^GSPC",
      "dates": ["2025-01-02", ...],
      "values": [5868.55, ...]
    }

Files are overwritten wholesale on every provider fetch.
"""

import logging
import math
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from registry import IndicatorInfo
from .files import StoreError, read_json, write_json_atomic


logger = logging.getLogger(__name__)


def _is_iso_date(value) -> bool:
    """True for a 'YYYY-MM-DD' string naming a real calendar day."""
    if not isinstance(value, str) or len(value) != 10:
        return False
    try:
        datetime.strptime(value, '%Y-%m-%d')
    except ValueError:
        return False
    return True


def _is_finite_number(value) -> bool:
    # bool is an int subclass; json NaN/Infinity load as floats
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


class SeriesStore:
    """Reads and writes per-indicator series files under a data directory."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def path_for(self, indicator: str) -> Path:
        return self.data_dir / f"{indicator}_data.json"

    def load(self, indicator: str) -> dict:
        """
        Load a stored series.

        Raises:
            StoreError: the file is missing, unreadable, or malformed
        """
        doc = read_json(self.path_for(indicator))
        if not isinstance(doc, dict):
            raise StoreError(f"{indicator}: stored document is not an object")

        dates = doc.get('dates')
        values = doc.get('values')
        if not isinstance(dates, list) or not isinstance(values, list):
            raise StoreError(f"{indicator}: stored document has no dates/values arrays")
        if len(dates) != len(values):
            raise StoreError(
                f"{indicator}: {len(dates)} dates but {len(values)} values"
            )
        for i, (d, v) in enumerate(zip(dates, values)):
            if not _is_iso_date(d):
                raise StoreError(f"{indicator}: entry {i} has invalid date {d!r}")
            if not _is_finite_number(v):
                raise StoreError(f"{indicator}: entry {i} has invalid value {v!r}")
        return doc

    def read(self, indicator: str) -> Optional[dict]:
        """Load a stored series, or None when there is nothing usable on disk."""
        try:
            return self.load(indicator)
        except StoreError as e:
            logger.info("No data available for %s: %s", indicator, e)
            return None

    def save(self, info: IndicatorInfo, dates: List[str], values: List[float]) -> dict:
        """Write a freshly fetched series, replacing whatever was stored."""
        doc = {
            'lastUpdated': datetime.now(timezone.utc).isoformat(),
            'indicator': info.key,
            'name': info.name,
            'source': info.source,
            'sourceId': info.source_id,
            'dates': list(dates),
            'values': list(values),
        }
        write_json_atomic(self.path_for(info.key), doc)
        logger.info("Saved %s (%d observations)", info.key, len(dates))
        return doc
