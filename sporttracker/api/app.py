"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from sporttracker import __version__, config
from sporttracker.api.routes import cache, health, sports
from sporttracker.services import CacheSweeper, SportsDataService, create_sports_service
from sporttracker.utilities.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown.

    Owns the lifetime of the cache, provider and sweeper. A service handed
    to create_app() is used as-is and is not closed here.
    """
    from sporttracker.providers import TSDBProvider

    # Startup
    setup_logging()
    logger.info("Starting SportTracker %s...", __version__)

    provider: TSDBProvider | None = None
    if getattr(app.state, "sports_service", None) is None:
        provider = TSDBProvider()
        app.state.sports_service = create_sports_service(provider=provider)
        logger.info("TheSportsDB provider ready")

    sweeper: CacheSweeper | None = None
    if config.CACHE_SWEEP_MINUTES > 0:
        sweeper = CacheSweeper(app.state.sports_service.cache, config.CACHE_SWEEP_MINUTES)
        sweeper.start()
    else:
        logger.info("Cache sweeper disabled")

    logger.info("SportTracker ready")

    yield

    # Shutdown
    logger.info("Shutting down SportTracker...")

    if sweeper:
        sweeper.stop()

    if provider:
        provider.close()
        app.state.sports_service = None

    logger.info("SportTracker stopped")


def create_app(sports_service: SportsDataService | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        sports_service: Prebuilt service (tests inject one with a fake provider).
            When omitted the lifespan builds one wired to TheSportsDB.
    """
    app = FastAPI(
        title="SportTracker API",
        description="Cached multi-sport teams, events and rosters",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.sports_service = sports_service

    app.include_router(health.router, tags=["Health"])
    app.include_router(sports.router, prefix="/api", tags=["Sports"])
    app.include_router(cache.router, prefix="/api", tags=["Cache"])

    return app
