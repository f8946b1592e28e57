"""
Yahoo Finance Data Source - market quotes keyed by ticker symbol.

Daily closes for indices, ETFs, futures and FX pairs (^GSPC, IEF, GC=F, JPY=X).
yfinance is blocking, so the async path runs it in a worker thread.
"""

import asyncio
import logging
from datetime import date, timedelta
from typing import Optional

import pandas as pd
import yfinance as yf
from dateutil.relativedelta import relativedelta
from yfinance.exceptions import YFRateLimitError

from .base import DataSource, SeriesData
from config import config


logger = logging.getLogger(__name__)


RATE_LIMIT_MESSAGE = "Yahoo Finance rate limit exceeded. Please wait 5-10 minutes and try again."

# Yahoo answers throttled requests with HTML, which surfaces as a JSON parse error
_RATE_LIMIT_MARKERS = ('Too Many Requests', '429', 'Unexpected token', 'Expecting value')


def classify_yahoo_error(symbol: str, error: Exception) -> str:
    """User-facing message for a failed Yahoo request."""
    if isinstance(error, YFRateLimitError):
        return RATE_LIMIT_MESSAGE

    message = str(error)
    if any(marker in message for marker in _RATE_LIMIT_MARKERS):
        return RATE_LIMIT_MESSAGE
    if 'Invalid symbol' in message or 'delisted' in message:
        return f"Invalid symbol: {symbol}"
    return f"Yahoo Finance error for {symbol}: {message}"


def closes_to_lists(history: pd.DataFrame):
    """Ascending (dates, values) from a yfinance history frame's Close column."""
    if history is None or history.empty or 'Close' not in history.columns:
        return [], []

    close = history['Close'].dropna().sort_index()
    dates = [idx.strftime('%Y-%m-%d') for idx in close.index]
    values = [float(v) for v in close.values]
    return dates, values


class YahooSource(DataSource):
    """Data source for Yahoo Finance daily history."""

    source_type = 'yahoo'

    def __init__(self, history_years: Optional[int] = None):
        self._history_years = history_years or config.yahoo_history_years

    @property
    def name(self) -> str:
        return "Yahoo Finance"

    async def fetch(self, symbol: str, years: Optional[int] = None) -> SeriesData:
        return await asyncio.to_thread(self.fetch_sync, symbol, years)

    def fetch_sync(self, symbol: str, years: Optional[int] = None) -> SeriesData:
        end = date.today() + timedelta(days=1)  # end is exclusive
        start = date.today() - relativedelta(years=years or self._history_years)

        try:
            history = yf.Ticker(symbol).history(
                start=start.isoformat(),
                end=end.isoformat(),
                interval='1d',
                auto_adjust=False,
                raise_errors=True,
            )
        except Exception as e:
            logger.error("Yahoo Finance request failed for %s: %s", symbol, e)
            return SeriesData.failed(symbol, classify_yahoo_error(symbol, e))

        dates, values = closes_to_lists(history)
        if not dates:
            return SeriesData.failed(symbol, f"No data returned from Yahoo Finance for {symbol}")

        return SeriesData(
            id=symbol,
            dates=dates,
            values=values,
            info={'source': 'Yahoo Finance', 'symbol': symbol},
        )
