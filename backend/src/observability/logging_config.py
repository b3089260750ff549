"""Structured logging setup for LicenseFlow.

Every record passes through RequestIDFilter, so log lines emitted while a
license is being validated can be tied back to the HTTP request. In JSON mode
the licensing identifiers passed via ``extra=`` (asset, brand, license) are
lifted into top-level keys.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from .request_id import get_request_id


# Attributes copied from ``extra=`` into JSON log lines
EXTRA_FIELDS = (
    "asset_id",
    "brand_id",
    "license_id",
    "outcome",
    "method",
    "path",
    "status_code",
    "duration_ms",
)

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = ("uvicorn.access",)

TEXT_FORMAT = "%(asctime)s - %(levelname)s - %(request_id)s - %(name)s - %(message)s"


class RequestIDFilter(logging.Filter):
    """Stamp each record with the current request ID."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id()
        return True


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "request_id": getattr(record, "request_id", "no-request-id"),
            "module": record.module,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        for name in EXTRA_FIELDS:
            if not hasattr(record, name):
                continue
            value = getattr(record, name)
            payload[name] = value if isinstance(value, (int, float, bool)) else str(value)

        if record.exc_info:
            payload["error"] = str(record.exc_info[1])
            payload["traceback"] = self.formatException(record.exc_info)

        return json.dumps(payload)


def configure_logging(level: str = "INFO", json_format: bool = True) -> None:
    """Install a single stdout handler on the root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        json_format: Emit JSON lines when True, human-readable text otherwise
    """
    numeric_level = getattr(logging, level.upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(TEXT_FORMAT))
    handler.addFilter(RequestIDFilter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(numeric_level)
    root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger; request IDs are added by the root handler."""
    return logging.getLogger(name)
