"""
Water-level reading endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from flood_ledger.api.deps import get_block_clock, get_ledger, get_sender
from flood_ledger.core.exceptions import ResourceNotFoundException
from flood_ledger.schemas.flood import (
    LastReadingIdResponse,
    ReadingListResponse,
    ReadingResponse,
    ReadingSubmit,
)
from flood_ledger.services.block_clock import BlockClock
from flood_ledger.services.ledger import FloodMonitoringLedger

router = APIRouter()


@router.post("", response_model=ReadingResponse, status_code=201)
async def submit_reading(
    submission: ReadingSubmit,
    sender: str = Depends(get_sender),
    ledger: FloodMonitoringLedger = Depends(get_ledger),
    clock: BlockClock = Depends(get_block_clock),
):
    """
    Submit a reading as the calling provider.

    Returns 403 when the provider is not authorized.
    """
    reading_id = ledger.submit_reading(
        submission.location_code,
        submission.river_level,
        submission.rainfall_amount,
        submission.sensor_id,
        sender=sender,
        block_height=clock.height,
    ).unwrap()
    return ReadingResponse(reading_id=reading_id, reading=ledger.get_reading(reading_id))


@router.get("", response_model=ReadingListResponse)
async def list_readings(
    location_code: Optional[str] = Query(None, description="Filter by location"),
    ledger: FloodMonitoringLedger = Depends(get_ledger),
):
    readings = [
        ReadingResponse(reading_id=reading_id, reading=reading)
        for reading_id, reading in ledger.get_readings(location_code).items()
    ]
    return ReadingListResponse(readings=readings, total=len(readings))


@router.get("/latest-id", response_model=LastReadingIdResponse)
async def get_last_reading_id(ledger: FloodMonitoringLedger = Depends(get_ledger)):
    return LastReadingIdResponse(last_reading_id=ledger.get_last_reading_id())


@router.get("/{reading_id}", response_model=ReadingResponse)
async def get_reading(
    reading_id: int, ledger: FloodMonitoringLedger = Depends(get_ledger)
):
    reading = ledger.get_reading(reading_id)
    if reading is None:
        raise ResourceNotFoundException(
            "Reading not found", {"reading_id": reading_id}
        )
    return ReadingResponse(reading_id=reading_id, reading=reading)
