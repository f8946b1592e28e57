"""API module - FastAPI routers and endpoints."""

from .auth import auth_router
from .data import data_router
from .estimates import estimates_router
from .news import news_router
from .health import health_router

__all__ = ['auth_router', 'data_router', 'estimates_router', 'news_router', 'health_router']
