"""
API v1 router configuration.
"""

from fastapi import APIRouter

from flood_ledger.api.v1.endpoints import alerts, chain, providers, readings, thresholds

api_router = APIRouter()

api_router.include_router(providers.router, prefix="/providers", tags=["providers"])
api_router.include_router(
    thresholds.router, prefix="/thresholds", tags=["thresholds"]
)
api_router.include_router(readings.router, prefix="/readings", tags=["readings"])
api_router.include_router(alerts.router, prefix="/alerts", tags=["alerts"])
api_router.include_router(chain.router, prefix="/chain", tags=["chain"])
