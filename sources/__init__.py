"""Data sources module - Provider adapters for FRED and Yahoo Finance."""

from .base import DataSource, SeriesData
from .fred import FREDSource
from .yahoo import YahooSource
from .manager import DataSourceManager, RefreshResult, UnknownIndicatorError

__all__ = [
    'DataSource',
    'SeriesData',
    'FREDSource',
    'YahooSource',
    'DataSourceManager',
    'RefreshResult',
    'UnknownIndicatorError',
]
