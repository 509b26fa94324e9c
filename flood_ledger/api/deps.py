"""
API dependencies: the host-owned ledger, block clock and caller identity.
"""

from fastapi import Request

from flood_ledger.core.config import settings
from flood_ledger.core.exceptions import AuthenticationException
from flood_ledger.services.block_clock import BlockClock
from flood_ledger.services.ledger import FloodMonitoringLedger


def get_ledger(request: Request) -> FloodMonitoringLedger:
    return request.app.state.ledger


def get_block_clock(request: Request) -> BlockClock:
    return request.app.state.block_clock


def get_sender(request: Request) -> str:
    """
    Resolve the caller identity from the provider header.
    """
    sender = request.headers.get(settings.provider_header, "").strip()
    if not sender:
        raise AuthenticationException(
            "Missing provider identity",
            {"header": settings.provider_header},
        )
    return sender
