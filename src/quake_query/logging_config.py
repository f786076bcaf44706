"""Structured JSON logging for the quake-query CLI and embedding services.

Each record becomes one JSON line with the query fields attached through
``extra=`` (country_code, event_count, duration_ms, url, status_code).
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

STRUCTURED_FIELDS = ("country_code", "event_count", "duration_ms", "url", "status_code")


class StructuredFormatter(logging.Formatter):
    """Outputs log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in STRUCTURED_FIELDS:
            val = getattr(record, name, None)
            if val is not None:
                log_entry[name] = val

        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def configure_logging(level: int = logging.INFO, stream=None) -> None:
    """Replace root handlers with a single JSON handler.

    Libraries never call this; applications do, once, at startup.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter())
    root.addHandler(handler)
