"""Store module - Flat JSON file persistence."""

from .files import StoreError, read_json, write_json_atomic
from .series_store import SeriesStore
from .estimates_store import EstimatesStore
from .news_store import NewsStore, empty_news

__all__ = [
    'StoreError',
    'read_json',
    'write_json_atomic',
    'SeriesStore',
    'EstimatesStore',
    'NewsStore',
    'empty_news',
]
