"""
Monotonic block-height counter supplied to the ledger by the host.
"""

import logging

from flood_ledger.core.exceptions import ValidationException

logger = logging.getLogger(__name__)


class BlockClock:
    """
    Tracks the current block height. Heights only move forward.
    """

    def __init__(self, initial_height: int = 0):
        if initial_height < 0:
            raise ValidationException(
                "Block height cannot be negative", {"height": initial_height}
            )
        self._height = initial_height

    @property
    def height(self) -> int:
        return self._height

    def advance(self, blocks: int = 1) -> int:
        """Move forward by a positive number of blocks and return the new height."""
        if blocks < 1:
            raise ValidationException(
                "Blocks to advance must be positive", {"blocks": blocks}
            )
        self._height += blocks
        logger.debug(f"Advanced block height to {self._height}")
        return self._height

    def set_height(self, height: int) -> int:
        """Jump to a height that is not below the current one."""
        if height < self._height:
            raise ValidationException(
                "Block height cannot move backwards",
                {"current": self._height, "requested": height},
            )
        self._height = height
        return self._height
