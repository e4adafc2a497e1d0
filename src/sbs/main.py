"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from sbs.auth.router import router as auth_router
from sbs.betslips.router import router as betslips_router
from sbs.config import get_settings
from sbs.database import close_db, create_tables, init_db
from sbs.health.router import router as health_router
from sbs.leaderboard.router import router as leaderboard_router
from sbs.middleware import setup_middleware
from sbs.users.router import router as users_router

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown lifecycle."""
    settings = get_settings()
    if not settings.jwt_secret:
        logger.warning("jwt_secret_not_set", detail="using development signing key")

    await init_db(settings.database_url)
    if settings.create_tables:
        await create_tables()
    logger.info("startup_complete", version=settings.app_version)

    yield

    await close_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="SBS API",
        description="Backend API for SBS — betslip sharing and punter leaderboards",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    setup_middleware(app, settings)
    app.include_router(health_router, tags=["Health"])
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(betslips_router)
    app.include_router(leaderboard_router)

    return app


def run() -> None:
    """Serve the API with uvicorn (console script entry point)."""
    settings = get_settings()
    uvicorn.run(
        "sbs.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
