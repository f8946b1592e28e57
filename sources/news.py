"""
News collection via Google Custom Search.

Two searches over the last 7 days ("S&P 500 bullish" / "S&P 500 bearish"),
five links each, stored as a small document for the dashboard sidebar.
"""

import logging
from datetime import date, datetime, timezone
from typing import List, Optional

import httpx

from .fred import get_async_client


logger = logging.getLogger(__name__)


SEARCH_URL = "https://www.googleapis.com/customsearch/v1"

SENTIMENT_QUERIES = {
    'bullish': 'S&P 500 bullish',
    'bearish': 'S&P 500 bearish',
}

ARTICLES_PER_SENTIMENT = 5


class NewsCollectionError(Exception):
    """The search API failed or returned nothing usable."""


async def _search(
    client: httpx.AsyncClient,
    api_key: str,
    engine_id: str,
    query: str,
) -> List[dict]:
    resp = await client.get(SEARCH_URL, params={
        'key': api_key,
        'cx': engine_id,
        'q': query,
        'num': ARTICLES_PER_SENTIMENT,
        'dateRestrict': 'd7',
        'sort': 'date',
    }, headers={'Accept': 'application/json'})

    if resp.status_code != 200:
        raise NewsCollectionError(f"Google API error ({query}): {resp.text}")

    items = resp.json().get('items') or []
    logger.info("Found %d articles for %r", len(items), query)
    return items[:ARTICLES_PER_SENTIMENT]


async def collect_news(
    api_key: str,
    engine_id: str,
    client: Optional[httpx.AsyncClient] = None,
) -> dict:
    """
    Run both sentiment searches and build the news document.

    Raises:
        NewsCollectionError: an API call failed or no articles were found
    """
    client = client or get_async_client()
    today = date.today().isoformat()

    grouped = {}
    for sentiment, query in SENTIMENT_QUERIES.items():
        try:
            items = await _search(client, api_key, engine_id, query)
        except httpx.HTTPError as e:
            raise NewsCollectionError(f"Google API request failed ({query}): {e}") from e

        grouped[sentiment] = [
            {
                'url': item.get('link'),
                'title': item.get('title'),
                'source': item.get('displayLink') or 'Unknown',
                'date': today,
                'sentiment': sentiment,
            }
            for item in items
        ]

    total = sum(len(articles) for articles in grouped.values())
    if total == 0:
        raise NewsCollectionError("No articles found from Google search")

    return {
        'bullish': grouped['bullish'],
        'bearish': grouped['bearish'],
        'lastUpdated': datetime.now(timezone.utc).isoformat(),
        'totalCost': 0,
    }
