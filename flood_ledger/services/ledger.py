import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from flood_ledger.core import monitoring
from flood_ledger.core.constants import ALERT_CLEARED, ALERT_ESCALATED, ALERT_OPENED
from flood_ledger.core.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
)
from flood_ledger.models.flood import (
    DEFAULT_THRESHOLDS,
    FloodAlert,
    FloodThresholds,
    WaterLevelReading,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LedgerError(str, Enum):
    """Failure kinds reported by ledger operations."""

    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class LedgerResult(Generic[T]):
    """
    Outcome of a ledger operation: either a value or an error, never both.
    """

    value: Optional[T] = None
    error: Optional[LedgerError] = None
    message: str = ""
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "LedgerResult[T]":
        return cls(value=value)

    @classmethod
    def failure(
        cls, error: LedgerError, message: str, **details: Any
    ) -> "LedgerResult[T]":
        return cls(error=error, message=message, details=details)

    def unwrap(self) -> T:
        """
        Return the value, or raise the application exception matching the error.
        """
        if self.error is LedgerError.UNAUTHORIZED:
            raise AuthorizationException(self.message, self.details)
        if self.error is LedgerError.NOT_FOUND:
            raise ResourceNotFoundException(self.message, self.details)
        return self.value


class FloodMonitoringLedger:
    """
    In-memory record-and-evaluate ledger for water-level readings.

    The host supplies the caller identity and the current block height on
    every call and is expected to serialize calls. Each operation is a single
    synchronous state transition; a failed operation changes nothing.
    """

    def __init__(self):
        self._last_reading_id = 0
        self._readings: Dict[int, WaterLevelReading] = {}
        self._thresholds: Dict[str, FloodThresholds] = {}
        self._providers: Dict[str, bool] = {}
        self._alerts: Dict[str, FloodAlert] = {}

    # --- Providers ---

    def authorize_provider(self, provider: str) -> LedgerResult[bool]:
        self._providers[provider] = True
        logger.info(f"Authorized data provider {provider}")
        return LedgerResult.success(True)

    def revoke_provider(self, provider: str) -> LedgerResult[bool]:
        # Readings already recorded from this provider stay untouched.
        self._providers[provider] = False
        logger.info(f"Revoked data provider {provider}")
        return LedgerResult.success(True)

    def is_authorized(self, provider: str) -> bool:
        return self._providers.get(provider, False)

    # --- Thresholds ---

    def set_flood_thresholds(
        self,
        location_code: str,
        river_level_threshold: float,
        rainfall_threshold: float,
        combined_threshold: float,
        block_height: int,
    ) -> LedgerResult[bool]:
        self._thresholds[location_code] = FloodThresholds(
            river_level_threshold=river_level_threshold,
            rainfall_threshold=rainfall_threshold,
            combined_threshold=combined_threshold,
            last_updated=block_height,
        )
        logger.info(
            f"Thresholds for {location_code} set to river={river_level_threshold} "
            f"rainfall={rainfall_threshold} combined={combined_threshold} "
            f"at block {block_height}"
        )
        return LedgerResult.success(True)

    def get_thresholds(self, location_code: str) -> Optional[FloodThresholds]:
        """Configured thresholds for a location, or None if never set."""
        return self._thresholds.get(location_code)

    def thresholds_for(self, location_code: str) -> FloodThresholds:
        """Thresholds in effect for a location, defaulting to all zeros."""
        return self._thresholds.get(location_code, DEFAULT_THRESHOLDS)

    # --- Readings ---

    @staticmethod
    def check_flood_condition(
        river_level: float, rainfall_amount: float, thresholds: FloodThresholds
    ) -> bool:
        return (
            river_level >= thresholds.river_level_threshold
            or rainfall_amount >= thresholds.rainfall_threshold
            or river_level + rainfall_amount >= thresholds.combined_threshold
        )

    def submit_reading(
        self,
        location_code: str,
        river_level: float,
        rainfall_amount: float,
        sensor_id: str,
        sender: str,
        block_height: int,
    ) -> LedgerResult[int]:
        """
        Record a reading from an authorized provider and return its id.

        The reading is evaluated against the thresholds in effect for its
        location; a flood condition opens or escalates that location's alert.
        """
        if not self.is_authorized(sender):
            monitoring.record_submission(accepted=False)
            logger.warning(
                f"Rejected reading for {location_code} from unauthorized provider {sender}"
            )
            return LedgerResult.failure(
                LedgerError.UNAUTHORIZED,
                "Provider is not authorized to submit readings",
                provider=sender,
            )

        reading_id = self._last_reading_id + 1
        is_flood = self.check_flood_condition(
            river_level, rainfall_amount, self.thresholds_for(location_code)
        )

        self._last_reading_id = reading_id
        self._readings[reading_id] = WaterLevelReading(
            location_code=location_code,
            river_level=river_level,
            rainfall_amount=rainfall_amount,
            reading_time=block_height,
            sensor_id=sensor_id,
            is_flood_condition=is_flood,
        )
        monitoring.record_submission(accepted=True)

        if is_flood:
            monitoring.record_flood_reading(location_code)
            self._update_flood_alert(location_code, reading_id, block_height)

        logger.debug(
            f"Recorded reading {reading_id} for {location_code} from {sensor_id} "
            f"(flood={is_flood})"
        )
        return LedgerResult.success(reading_id)

    def get_reading(self, reading_id: int) -> Optional[WaterLevelReading]:
        return self._readings.get(reading_id)

    def get_last_reading_id(self) -> int:
        return self._last_reading_id

    def get_readings(
        self, location_code: Optional[str] = None
    ) -> Dict[int, WaterLevelReading]:
        """Readings keyed by id in submission order, optionally for one location."""
        return {
            reading_id: reading
            for reading_id, reading in self._readings.items()
            if location_code is None or reading.location_code == location_code
        }

    # --- Alerts ---

    def _update_flood_alert(
        self, location_code: str, reading_id: int, block_height: int
    ):
        current = self._alerts.get(location_code)

        if current is not None and current.is_active:
            alert = current.model_copy(
                update={
                    "alert_level": current.alert_level + 1,
                    "last_reading_id": reading_id,
                }
            )
            transition = ALERT_ESCALATED
        else:
            alert = FloodAlert(
                alert_level=1,
                start_time=block_height,
                last_reading_id=reading_id,
                is_active=True,
            )
            transition = ALERT_OPENED

        self._alerts[location_code] = alert
        monitoring.record_alert_transition(transition)
        logger.info(
            f"Flood alert {transition} for {location_code}: "
            f"level {alert.alert_level} (reading {reading_id})"
        )

    def clear_flood_alert(self, location_code: str) -> LedgerResult[bool]:
        current = self._alerts.get(location_code)
        if current is None:
            return LedgerResult.failure(
                LedgerError.NOT_FOUND,
                "No flood alert exists for location",
                location_code=location_code,
            )

        self._alerts[location_code] = current.model_copy(update={"is_active": False})
        monitoring.record_alert_transition(ALERT_CLEARED)
        logger.info(
            f"Flood alert {ALERT_CLEARED} for {location_code} at level {current.alert_level}"
        )
        return LedgerResult.success(True)

    def get_alert(self, location_code: str) -> Optional[FloodAlert]:
        return self._alerts.get(location_code)

    def get_alerts(self, active_only: bool = False) -> Dict[str, FloodAlert]:
        return {
            location_code: alert
            for location_code, alert in self._alerts.items()
            if alert.is_active or not active_only
        }
