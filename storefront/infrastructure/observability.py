"""Structured Logging - JSON formatter and setup for the storefront logger tree.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (order_id, profile_id, error_code, ...) surfaced when present
    - setup_logging owns exactly one handler on the "storefront" logger; repeat calls replace it

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Configures the package logger, not root: embedding applications keep their own handlers
"""

import json
import logging
from datetime import datetime, timezone

LOGGER_NAME = "storefront"
EXTRA_FIELDS: tuple[str, ...] = (
    "order_id", "profile_id", "error_code", "field", "line_count", "total_cents",
)

_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure the storefront logger. Returns the installed handler."""
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler
    return handler
