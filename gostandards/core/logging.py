"""Structured JSON logging configuration.

All log output goes to stdout, one JSON object per line, so analysis runs
can be collected by container log drivers.

Format per line:
    {"ts": "2025-03-01T12:00:00Z", "level": "INFO", "logger": "gostandards.services.analysis_service", "msg": "...", ...}

Set ``LOG_FORMAT=text`` for a plain human-readable format instead.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import TextIO

# Attributes copied from ``extra={}`` into the JSON payload
_EXTRA_FIELDS = ("analysis_id", "tool")

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Emit each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)

        if record.exc_info and record.exc_info[0] is not None:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logging(stream: TextIO | None = None, default_level: str = "INFO") -> None:
    """Configure the root logger.

    ``LOG_LEVEL`` picks the level (default ``default_level``), ``LOG_FORMAT``
    picks ``json`` (default) or ``text``. Output goes to ``stream``, stdout
    when omitted.
    """
    level_name = os.getenv("LOG_LEVEL", default_level).upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(stream or sys.stdout)
    if os.getenv("LOG_FORMAT", "json").lower() == "text":
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    else:
        handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers (e.g. uvicorn defaults)
    root.handlers.clear()
    root.addHandler(handler)

    for noisy in ("uvicorn.access", "httpcore", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
