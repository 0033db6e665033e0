"""Atomic Counters — FastAPI application factory."""

import logging

from fastapi import FastAPI

from atomic_counters.config import settings
from atomic_counters.infrastructure.api.routes_counters import router as counters_router
from atomic_counters.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Atomic Counters",
        description="Globally unique, monotonically advancing counters on DynamoDB",
        version="0.1.0",
        debug=settings.debug,
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(counters_router, prefix="/api")

    logger.debug("Counters API created (table=%s)", settings.table_name)
    return app


app = create_app()
