"""
News Endpoints

Reading the stored news is public; collecting and resetting the cost counter
are admin-only.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from config import config
from sources.news import NewsCollectionError, collect_news
from store import NewsStore, StoreError
from .auth import require_admin
from .deps import get_news_store


logger = logging.getLogger(__name__)

news_router = APIRouter()


@news_router.get("/api/news/sp500")
async def get_news(store: NewsStore = Depends(get_news_store)):
    return JSONResponse({"success": True, "data": store.load()})


@news_router.post("/api/news/collect", dependencies=[Depends(require_admin)])
async def collect(store: NewsStore = Depends(get_news_store)):
    if not config.google_search_configured:
        raise HTTPException(
            status_code=400,
            detail="Google Search API key or Engine ID not configured.",
        )

    logger.info("Collecting S&P 500 news articles from Google...")
    try:
        doc = await collect_news(config.google_search_api_key, config.google_search_engine_id)
    except NewsCollectionError as e:
        logger.error("Error collecting news: %s", e)
        raise HTTPException(status_code=502, detail=str(e))

    store.save(doc)
    bullish, bearish = len(doc['bullish']), len(doc['bearish'])
    return JSONResponse({
        "success": True,
        "message": f"Successfully collected {bullish + bearish} articles "
                   f"({bullish} bullish, {bearish} bearish)",
        "data": doc,
    })


@news_router.post("/api/news/reset-cost", dependencies=[Depends(require_admin)])
async def reset_cost(store: NewsStore = Depends(get_news_store)):
    try:
        store.reset_cost()
    except StoreError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return JSONResponse({"success": True, "message": "Cost counter reset to $0.00"})
