"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import settings
from src.api.routes import router
from src.calculators.tax_data import DEFAULT_TAX_YEAR, TAX_YEARS

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup: configure logging and report loaded tax tables."""
    logging.basicConfig(level=settings.log_level)
    logger.info(
        "Starting up with tax years %s (default %s)",
        ", ".join(sorted(TAX_YEARS)),
        DEFAULT_TAX_YEAR,
    )

    yield

    logger.info("Shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="Australian Tax Calculator", lifespan=lifespan)
    app.include_router(router)
    return app
