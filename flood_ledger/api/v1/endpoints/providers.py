"""
Data provider authorization endpoints.
"""

from fastapi import APIRouter, Depends

from flood_ledger.api.deps import get_ledger
from flood_ledger.schemas.flood import ProviderStatus
from flood_ledger.services.ledger import FloodMonitoringLedger

router = APIRouter()


@router.post("/{provider}/authorize", response_model=ProviderStatus)
async def authorize_provider(
    provider: str, ledger: FloodMonitoringLedger = Depends(get_ledger)
):
    """Authorize a data provider to submit readings."""
    ledger.authorize_provider(provider).unwrap()
    return ProviderStatus(provider=provider, authorized=True)


@router.post("/{provider}/revoke", response_model=ProviderStatus)
async def revoke_provider(
    provider: str, ledger: FloodMonitoringLedger = Depends(get_ledger)
):
    """Revoke a provider. Readings it already submitted are kept."""
    ledger.revoke_provider(provider).unwrap()
    return ProviderStatus(provider=provider, authorized=False)


@router.get("/{provider}", response_model=ProviderStatus)
async def get_provider(
    provider: str, ledger: FloodMonitoringLedger = Depends(get_ledger)
):
    return ProviderStatus(provider=provider, authorized=ledger.is_authorized(provider))
