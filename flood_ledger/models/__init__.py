"""
State records for the Flood Monitoring Ledger.
"""

from .flood import (
    DEFAULT_THRESHOLDS,
    FloodAlert,
    FloodThresholds,
    LedgerRecord,
    WaterLevelReading,
)

__all__ = [
    "LedgerRecord",
    "WaterLevelReading",
    "FloodThresholds",
    "FloodAlert",
    "DEFAULT_THRESHOLDS",
]
