import logging
import logging.config
import sys

from flood_ledger.core.config import settings


class RequestIdFilter(logging.Filter):
    """
    Filter to inject request_id into log records.
    Relies on contextvar set by middleware.
    """

    def filter(self, record):
        from flood_ledger.core.middleware import request_id_context

        record.request_id = request_id_context.get() or "system"
        return True


def build_logging_config() -> dict:
    """
    Build the dictConfig payload for the configured level and format.
    """
    handlers = ["console"]
    level = settings.log_level.upper()

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"request_id": {"()": RequestIdFilter}},
        "formatters": {
            "console": {
                "format": "%(asctime)s - %(levelname)s - [%(request_id)s] - %(name)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(levelname)s %(request_id)s %(name)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": sys.stdout,
                "formatter": "json" if settings.log_format == "json" else "console",
                "filters": ["request_id"],
                "level": level,
            },
        },
        "loggers": {
            "root": {"handlers": handlers, "level": level, "propagate": False},
            "flood_ledger": {"handlers": handlers, "level": level, "propagate": False},
            "uvicorn": {"handlers": handlers, "level": "INFO", "propagate": False},
            "uvicorn.access": {
                "handlers": handlers,
                "level": "INFO",
                "propagate": False,
            },
            "fastapi": {"handlers": handlers, "level": level, "propagate": False},
        },
    }


def setup_logging():
    """
    Configure logging using logging.dictConfig.
    """
    try:
        logging.config.dictConfig(build_logging_config())
    except (ValueError, TypeError, AttributeError, ImportError) as e:
        print(f"Failed to setup logging: {e}")
        # Fallback basic config
        logging.basicConfig(level=logging.INFO)
