"""
Market Momentum Dashboard - backend

Serves the dashboard's JSON API and static frontend.

Features:
- Locally cached series for US and Japanese markets (FRED + Yahoo Finance)
- Momentum index: indicators rebased to 100 at a selectable baseline, aligned
  to common dates
- Month-over-month growth of month-end values, last 24 months per indicator
- Visitor estimates, curated news links, admin-only news collection
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import config
from registry import registry
from api import auth_router, data_router, estimates_router, news_router, health_router
from sources.fred import close_clients


logger = logging.getLogger("momentum")


# =============================================================================
# STARTUP
# =============================================================================

def configure_logging() -> None:
    """Root handler for app loggers; a no-op if one is already installed."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def log_startup() -> None:
    """Log configuration status."""
    logger.info("=" * 60)
    logger.info("Market Momentum Dashboard Starting Up")
    logger.info("=" * 60)
    logger.info("Data directory: %s", config.data_dir)
    logger.info("Indicators: %s", ", ".join(registry.keys()))
    logger.info("-" * 60)
    logger.info("API Keys:")
    logger.info("  FRED: %s", 'SET' if config.fred_api_key else 'NOT SET')
    logger.info("  Google Search: %s", 'SET' if config.google_search_configured else 'NOT SET')
    logger.info("  Admin password: %s", 'SET' if config.admin_password else 'NOT SET')
    for name in config.missing_settings():
        logger.warning("WARNING: %s not set in environment variables", name)
    logger.info("-" * 60)
    logger.info("Frontend: %s", STATIC_PATH if is_frontend_built() else "not found (API only)")
    logger.info("=" * 60)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    config.data_dir.mkdir(parents=True, exist_ok=True)
    log_startup()
    yield
    await close_clients()


# =============================================================================
# APP INITIALIZATION
# =============================================================================

app = FastAPI(
    title="Market Momentum Dashboard",
    description="Momentum and month-over-month growth for market indicators",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers (data router keeps its fixed paths ahead of /{indicator})
app.include_router(auth_router)
app.include_router(data_router)
app.include_router(estimates_router)
app.include_router(news_router)
app.include_router(health_router)


# =============================================================================
# ERROR RESPONSES - {"success": false, "message": ...}
# =============================================================================

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', []))}: {err.get('msg')}" for err in errors
    ) or "Invalid request"
    return JSONResponse(status_code=422, content={"success": False, "message": message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": str(exc)},
    )


# =============================================================================
# STATIC FRONTEND
# =============================================================================

STATIC_PATH = Path(__file__).parent / "static"


def is_frontend_built() -> bool:
    return (STATIC_PATH / "index.html").exists()


if is_frontend_built():
    app.mount("/static", StaticFiles(directory=STATIC_PATH), name="static")

    @app.get("/")
    async def index():
        return FileResponse(STATIC_PATH / "index.html")

    @app.get("/japan")
    async def japan():
        page = STATIC_PATH / "japan.html"
        return FileResponse(page if page.exists() else STATIC_PATH / "index.html")


# =============================================================================
# RUN
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=3000,
        reload=True
    )
