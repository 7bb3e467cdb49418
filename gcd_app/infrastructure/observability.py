"""Structured Logging — JSON formatter and setup for the GCD service.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, path, field, error_timestamp, debug_info, n, m, divisor)
      surfaced when present
    - setup_logging installs exactly one handler, even when called repeatedly

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "error_code", "path", "field", "error_timestamp", "debug_info",
    "n", "m", "divisor",
)
_NUMERIC_FIELDS = frozenset({"n", "m", "divisor"})

_HANDLER_NAME = "gcd_app"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is None:
                continue
            # u64 values lose precision as JSON numbers in most consumers
            log[key] = str(val) if key in _NUMERIC_FIELDS else val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text"):
    """Configure logging for the application."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
