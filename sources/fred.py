"""
FRED Data Source - Federal Reserve Economic Data

Government statistics series keyed by FRED series id (DCOILWTICO, DTWEXAFEGS, ...).
"""

import logging
from datetime import date
from typing import Optional

import httpx
from dateutil.relativedelta import relativedelta

from .base import DataSource, SeriesData
from config import config


logger = logging.getLogger(__name__)


# Module-level connection pool for HTTP connection reuse
_async_client: Optional[httpx.AsyncClient] = None
_sync_client: Optional[httpx.Client] = None

_LIMITS = httpx.Limits(
    max_keepalive_connections=10,
    max_connections=20,
    keepalive_expiry=30.0
)


def get_async_client() -> httpx.AsyncClient:
    """Get or create the shared async HTTP client with connection pooling."""
    global _async_client
    if _async_client is None or _async_client.is_closed:
        _async_client = httpx.AsyncClient(timeout=config.http_timeout, limits=_LIMITS)
    return _async_client


def get_sync_client() -> httpx.Client:
    """Get or create the shared sync HTTP client with connection pooling."""
    global _sync_client
    if _sync_client is None or _sync_client.is_closed:
        _sync_client = httpx.Client(timeout=config.http_timeout, limits=_LIMITS)
    return _sync_client


async def close_clients() -> None:
    """Close the shared clients (app shutdown)."""
    global _async_client, _sync_client
    if _async_client is not None and not _async_client.is_closed:
        await _async_client.aclose()
    if _sync_client is not None and not _sync_client.is_closed:
        _sync_client.close()
    _async_client = None
    _sync_client = None


class FREDSource(DataSource):
    """Data source for FRED (Federal Reserve Economic Data)."""

    BASE_URL = "https://api.stlouisfed.org/fred"
    source_type = 'fred'

    def __init__(
        self,
        api_key: Optional[str] = None,
        observation_start: Optional[str] = None,
        async_client: Optional[httpx.AsyncClient] = None,
        sync_client: Optional[httpx.Client] = None,
    ):
        self._api_key = api_key if api_key is not None else config.fred_api_key
        self._observation_start = observation_start or config.fred_observation_start
        self._async_client = async_client
        self._sync_client = sync_client

    @property
    def name(self) -> str:
        return "FRED"

    @property
    def available(self) -> bool:
        return bool(self._api_key)

    def _params(self, series_id: str, years: Optional[int]) -> dict:
        if years:
            start = (date.today() - relativedelta(years=years)).isoformat()
        else:
            start = self._observation_start
        return {
            'series_id': series_id,
            'api_key': self._api_key,
            'file_type': 'json',
            'observation_start': start,
        }

    def _parse_response(self, series_id: str, resp: httpx.Response) -> SeriesData:
        """Turn an observations response into SeriesData, classifying failures."""
        # FRED returns 429 on rate limit, 400 on bad series, 500 on server error
        if resp.status_code == 429:
            return SeriesData.failed(
                series_id,
                "FRED API rate limit exceeded (120 requests/minute). Please wait a moment."
            )
        if resp.status_code >= 500:
            return SeriesData.failed(
                series_id, f"FRED API server error ({resp.status_code}) for {series_id}."
            )
        if resp.status_code == 400:
            return SeriesData.failed(
                series_id, f"Bad request for series '{series_id}'. The series ID may not exist."
            )
        if resp.status_code != 200:
            return SeriesData.failed(
                series_id, f"FRED API error! status: {resp.status_code}"
            )

        try:
            payload = resp.json()
        except ValueError:
            return SeriesData.failed(series_id, f"FRED returned malformed JSON for {series_id}")

        if 'error_message' in payload:
            return SeriesData.failed(series_id, payload.get('error_message', 'Unknown error'))

        # Missing observations come through as "."
        dates = []
        values = []
        for obs in payload.get('observations', []):
            raw = obs.get('value')
            if not raw or raw == '.':
                continue
            try:
                value = float(raw)
            except (ValueError, TypeError):
                continue
            dates.append(obs['date'])
            values.append(value)

        if not dates:
            return SeriesData.failed(series_id, f"No observations returned from FRED for {series_id}")

        return SeriesData(
            id=series_id,
            dates=dates,
            values=values,
            info={'source': 'FRED', 'series_id': series_id},
        )

    async def fetch(self, series_id: str, years: Optional[int] = None) -> SeriesData:
        """Fetch observations from the FRED API."""
        if not self._api_key:
            return SeriesData.failed(series_id, "FRED API key not configured")

        client = self._async_client or get_async_client()
        try:
            resp = await client.get(
                f"{self.BASE_URL}/series/observations",
                params=self._params(series_id, years),
            )
        except httpx.TimeoutException:
            return SeriesData.failed(series_id, f"Timeout fetching {series_id} from FRED")
        except httpx.HTTPError as e:
            logger.error("FRED request failed for %s: %s", series_id, e)
            return SeriesData.failed(series_id, f"Error fetching {series_id}: {e}")

        return self._parse_response(series_id, resp)

    def fetch_sync(self, series_id: str, years: Optional[int] = None) -> SeriesData:
        """Synchronous version using httpx sync client."""
        if not self._api_key:
            return SeriesData.failed(series_id, "FRED API key not configured")

        client = self._sync_client or get_sync_client()
        try:
            resp = client.get(
                f"{self.BASE_URL}/series/observations",
                params=self._params(series_id, years),
            )
        except httpx.TimeoutException:
            return SeriesData.failed(series_id, f"Timeout fetching {series_id} from FRED")
        except httpx.HTTPError as e:
            logger.error("FRED request failed for %s: %s", series_id, e)
            return SeriesData.failed(series_id, f"Error fetching {series_id}: {e}")

        return self._parse_response(series_id, resp)
