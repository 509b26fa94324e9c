"""
Ledger state records.

All records are frozen: the ledger replaces a record wholesale instead of
mutating it, so a record handed out by an accessor never changes underneath
the caller.
"""

from pydantic import BaseModel, ConfigDict, Field


class LedgerRecord(BaseModel):
    """Base model for ledger state records."""

    model_config = ConfigDict(frozen=True, from_attributes=True)


class WaterLevelReading(LedgerRecord):
    location_code: str = Field(..., description="Monitored zone identifier")
    river_level: float = Field(..., description="Measured river level")
    rainfall_amount: float = Field(..., description="Measured rainfall amount")
    reading_time: int = Field(..., description="Block height at submission")
    sensor_id: str = Field(..., description="Reporting sensor identifier")
    is_flood_condition: bool = Field(
        ..., description="Whether the reading met a flood threshold"
    )


class FloodThresholds(LedgerRecord):
    river_level_threshold: float = 0
    rainfall_threshold: float = 0
    combined_threshold: float = 0
    last_updated: int = Field(0, description="Block height of the last update")


class FloodAlert(LedgerRecord):
    alert_level: int = Field(0, ge=0)
    start_time: int = Field(0, description="Block height the alert epoch began")
    last_reading_id: int = 0
    is_active: bool = False


# Zero-value record used for locations without configured thresholds.
# Any non-negative reading meets it.
DEFAULT_THRESHOLDS = FloodThresholds()
