"""Structured Logging: JSON formatter and setup for the onion process.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (operand, y, result, error_code, source) surfaced when present
    - Repeated setup_logging calls replace the handler instead of stacking

Design Decisions:
    - JSONFormatter on stdlib logging: no logging dependency to carry
    - setup_logging called once by the entry point
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_KEYS = ("operand", "y", "result", "error_code", "source")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging. Returns the installed handler."""
    global _handler
    if _handler is not None:
        logging.root.removeHandler(_handler)

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler
    return handler
