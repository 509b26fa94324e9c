"""
Flood threshold endpoints.
"""

from fastapi import APIRouter, Depends

from flood_ledger.api.deps import get_block_clock, get_ledger
from flood_ledger.schemas.flood import ThresholdResponse, ThresholdUpdate
from flood_ledger.services.block_clock import BlockClock
from flood_ledger.services.ledger import FloodMonitoringLedger

router = APIRouter()


def _threshold_response(
    ledger: FloodMonitoringLedger, location_code: str
) -> ThresholdResponse:
    return ThresholdResponse(
        location_code=location_code,
        configured=ledger.get_thresholds(location_code) is not None,
        thresholds=ledger.thresholds_for(location_code),
    )


@router.put("/{location_code}", response_model=ThresholdResponse)
async def set_flood_thresholds(
    location_code: str,
    update: ThresholdUpdate,
    ledger: FloodMonitoringLedger = Depends(get_ledger),
    clock: BlockClock = Depends(get_block_clock),
):
    """
    Replace the thresholds for a location, stamped with the current block height.
    """
    ledger.set_flood_thresholds(
        location_code,
        update.river_level_threshold,
        update.rainfall_threshold,
        update.combined_threshold,
        block_height=clock.height,
    ).unwrap()
    return _threshold_response(ledger, location_code)


@router.get("/{location_code}", response_model=ThresholdResponse)
async def get_flood_thresholds(
    location_code: str, ledger: FloodMonitoringLedger = Depends(get_ledger)
):
    """Thresholds in effect for a location (all zeros when never configured)."""
    return _threshold_response(ledger, location_code)
