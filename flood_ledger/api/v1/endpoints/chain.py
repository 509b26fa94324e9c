"""
Host block-height endpoints.
"""

from fastapi import APIRouter, Depends

from flood_ledger.api.deps import get_block_clock
from flood_ledger.schemas.flood import ChainAdvance, ChainHeightUpdate, ChainStatus
from flood_ledger.services.block_clock import BlockClock

router = APIRouter()


@router.get("", response_model=ChainStatus)
async def get_chain_status(clock: BlockClock = Depends(get_block_clock)):
    return ChainStatus(block_height=clock.height)


@router.post("/advance", response_model=ChainStatus)
async def advance_chain(
    advance: ChainAdvance, clock: BlockClock = Depends(get_block_clock)
):
    return ChainStatus(block_height=clock.advance(advance.blocks))


@router.put("", response_model=ChainStatus)
async def set_chain_height(
    update: ChainHeightUpdate, clock: BlockClock = Depends(get_block_clock)
):
    """Jump to a block height. Moving backwards is rejected with 422."""
    return ChainStatus(block_height=clock.set_height(update.block_height))
