"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from spreadsontoast.config import settings
from spreadsontoast.database import Database
from spreadsontoast.logging import configure_logging
from spreadsontoast.api import cron, external, health, seasons, standings, teams
from spreadsontoast.api.errors import register_error_handlers
from spreadsontoast.services.mlb.mlb_api import MLBStatsAPIClient

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    # Startup
    configure_logging()
    logger.info("Starting spreadsontoast API", environment=settings.environment)
    app.state.db = Database()
    app.state.mlb_client = MLBStatsAPIClient()

    yield

    # Shutdown
    logger.info("Shutting down spreadsontoast API")
    await app.state.db.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="spreadsontoast API",
        description="MLB standings, schedules and win-total tracking",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(cron.router, prefix="/api", tags=["Cron"])
    app.include_router(external.router, prefix="/api", tags=["External"])
    app.include_router(standings.router, prefix="/api", tags=["Standings"])
    app.include_router(teams.router, prefix="/api", tags=["Teams"])
    app.include_router(seasons.router, prefix="/api", tags=["Seasons"])

    @app.get("/")
    async def root() -> dict:
        """Root endpoint."""
        return {
            "name": "spreadsontoast API",
            "version": "0.1.0",
            "docs": "/docs",
        }

    return app


app = create_app()
