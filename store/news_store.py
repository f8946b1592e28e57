"""Curated S&P 500 news links (bullish / bearish)."""

from pathlib import Path
from typing import Any, Dict

from .files import StoreError, read_json, write_json_atomic


def empty_news() -> Dict[str, Any]:
    return {
        'bullish': [],
        'bearish': [],
        'lastUpdated': None,
        'totalCost': 0,
    }


class NewsStore:

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Dict[str, Any]:
        try:
            doc = read_json(self.path)
        except StoreError:
            return empty_news()
        return doc if isinstance(doc, dict) else empty_news()

    def save(self, doc: Dict[str, Any]) -> None:
        write_json_atomic(self.path, doc)

    def reset_cost(self) -> None:
        """
        Zero the cost counter.

        Raises:
            StoreError: no news has been collected yet
        """
        doc = read_json(self.path)
        doc['totalCost'] = 0
        self.save(doc)
