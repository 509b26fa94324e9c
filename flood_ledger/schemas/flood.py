"""
Pydantic schemas for the ledger API.
"""

from typing import Dict, List

from pydantic import BaseModel, Field

from flood_ledger.models.flood import FloodAlert, FloodThresholds, WaterLevelReading


class ReadingSubmit(BaseModel):
    location_code: str = Field(..., min_length=1, description="Monitored zone")
    river_level: float = Field(..., ge=0, description="Measured river level")
    rainfall_amount: float = Field(..., ge=0, description="Measured rainfall amount")
    sensor_id: str = Field(..., min_length=1, description="Reporting sensor")


class ReadingResponse(BaseModel):
    reading_id: int
    reading: WaterLevelReading


class ReadingListResponse(BaseModel):
    readings: List[ReadingResponse]
    total: int


class LastReadingIdResponse(BaseModel):
    last_reading_id: int


class ThresholdUpdate(BaseModel):
    river_level_threshold: float = Field(..., ge=0)
    rainfall_threshold: float = Field(..., ge=0)
    combined_threshold: float = Field(..., ge=0)


class ThresholdResponse(BaseModel):
    location_code: str
    configured: bool = Field(
        ..., description="False when the zero-value default is in effect"
    )
    thresholds: FloodThresholds


class AlertResponse(BaseModel):
    location_code: str
    alert: FloodAlert


class AlertListResponse(BaseModel):
    alerts: Dict[str, FloodAlert]
    total: int


class ProviderStatus(BaseModel):
    provider: str
    authorized: bool


class OperationResult(BaseModel):
    success: bool = True


class ChainStatus(BaseModel):
    block_height: int


class ChainAdvance(BaseModel):
    blocks: int = Field(1, ge=1)


class ChainHeightUpdate(BaseModel):
    block_height: int = Field(..., ge=0)
