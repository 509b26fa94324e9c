"""
Prometheus metrics for ledger activity.
"""

from prometheus_client import CONTENT_TYPE_LATEST, Counter, generate_latest

READINGS_SUBMITTED = Counter(
    "ledger_readings_submitted_total",
    "Reading submissions by outcome",
    ["status"],
)

FLOOD_READINGS = Counter(
    "ledger_flood_readings_total",
    "Accepted readings that met a flood condition",
    ["location_code"],
)

ALERT_TRANSITIONS = Counter(
    "ledger_alert_transitions_total",
    "Flood alert state transitions",
    ["transition"],
)

METRICS_CONTENT_TYPE = CONTENT_TYPE_LATEST


def record_submission(accepted: bool):
    """Record a reading submission outcome."""
    status = "accepted" if accepted else "rejected"
    READINGS_SUBMITTED.labels(status=status).inc()


def record_flood_reading(location_code: str):
    """Record an accepted reading that met a flood condition."""
    FLOOD_READINGS.labels(location_code=location_code).inc()


def record_alert_transition(transition: str):
    """Record an alert opened/escalated/cleared transition."""
    ALERT_TRANSITIONS.labels(transition=transition).inc()


def get_metrics() -> bytes:
    """Get Prometheus metrics in text format."""
    return generate_latest()
