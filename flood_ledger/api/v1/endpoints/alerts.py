"""
Flood alert endpoints.
"""

from fastapi import APIRouter, Depends, Query

from flood_ledger.api.deps import get_ledger
from flood_ledger.core.exceptions import ResourceNotFoundException
from flood_ledger.schemas.flood import AlertListResponse, AlertResponse
from flood_ledger.services.ledger import FloodMonitoringLedger

router = APIRouter()


@router.get("", response_model=AlertListResponse)
async def list_alerts(
    active_only: bool = Query(False, description="Only alerts in an active epoch"),
    ledger: FloodMonitoringLedger = Depends(get_ledger),
):
    alerts = ledger.get_alerts(active_only=active_only)
    return AlertListResponse(alerts=alerts, total=len(alerts))


@router.get("/{location_code}", response_model=AlertResponse)
async def get_alert(
    location_code: str, ledger: FloodMonitoringLedger = Depends(get_ledger)
):
    alert = ledger.get_alert(location_code)
    if alert is None:
        raise ResourceNotFoundException(
            "No flood alert exists for location", {"location_code": location_code}
        )
    return AlertResponse(location_code=location_code, alert=alert)


@router.post("/{location_code}/clear", response_model=AlertResponse)
async def clear_flood_alert(
    location_code: str, ledger: FloodMonitoringLedger = Depends(get_ledger)
):
    """
    Deactivate a location's alert, keeping its level, start and last reading.
    """
    ledger.clear_flood_alert(location_code).unwrap()
    return AlertResponse(location_code=location_code, alert=ledger.get_alert(location_code))
