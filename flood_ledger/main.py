"""
Main FastAPI application.
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from flood_ledger.api.v1.api import api_router
from flood_ledger.core.config import settings
from flood_ledger.core.constants import API_DESCRIPTION
from flood_ledger.core.logging_config import setup_logging
from flood_ledger.core.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from flood_ledger.core.monitoring import METRICS_CONTENT_TYPE, get_metrics
from flood_ledger.services.block_clock import BlockClock
from flood_ledger.services.ledger import FloodMonitoringLedger

setup_logging()

logger = logging.getLogger(__name__)


def init_ledger_state(app: FastAPI):
    """Give the app a fresh ledger and block clock for its lifetime."""
    app.state.ledger = FloodMonitoringLedger()
    app.state.block_clock = BlockClock(settings.initial_block_height)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("Starting Flood Monitoring Ledger API...")
    init_ledger_state(app)
    logger.info(
        f"Ledger ready at block height {app.state.block_clock.height}"
    )

    yield

    logger.info(
        f"Shutting down Flood Monitoring Ledger API after "
        f"{app.state.ledger.get_last_reading_id()} readings"
    )


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description=API_DESCRIPTION,
    openapi_url=f"{settings.api_prefix}/openapi.json" if settings.debug else None,
    docs_url=f"{settings.api_prefix}/docs" if settings.debug else None,
    redoc_url=f"{settings.api_prefix}/redoc" if settings.debug else None,
    lifespan=lifespan,
)


@app.get("/health", tags=["General"])
async def health_check():
    """
    ## Health Check

    Check the health status of the Flood Monitoring Ledger API.
    """
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.version,
        "block_height": app.state.block_clock.height,
        "timestamp": time.time(),
    }


@app.get("/metrics", tags=["General"], include_in_schema=False)
async def metrics():
    return Response(content=get_metrics(), media_type=METRICS_CONTENT_TYPE)


@app.get("/", tags=["General"])
async def root():
    """
    ## Welcome to the Flood Monitoring Ledger API
    """
    return {
        "message": "Flood Monitoring Ledger API",
        "version": settings.version,
        "status": "running",
        "endpoints": {
            "providers": f"{settings.api_prefix}/providers/",
            "thresholds": f"{settings.api_prefix}/thresholds/",
            "readings": f"{settings.api_prefix}/readings",
            "alerts": f"{settings.api_prefix}/alerts",
            "chain": f"{settings.api_prefix}/chain",
            "health": "/health",
        },
    }


# Middleware Stack (last added runs first)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(ErrorHandlingMiddleware)
app.add_middleware(LoggingMiddleware)

app.include_router(api_router, prefix=settings.api_prefix)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "flood_ledger.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
