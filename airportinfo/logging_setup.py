"""Structured JSON logging for the CLI and API processes.

Log records go to stderr so that report text on stdout stays clean.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import IO, Any, Dict, Optional

EXTRA_FIELDS = (
    "routes_path",
    "rows",
    "airports",
    "mode",
    "request_path",
    "method",
    "status_code",
    "latency_ms",
    "client",
)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            {attr: getattr(record, attr) for attr in EXTRA_FIELDS if getattr(record, attr, None) is not None}
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def _resolve_level(default_level: str | int) -> str | int:
    raw_level = os.environ.get("LOG_LEVEL", "").strip().upper()
    # Unknown level names use the default
    if raw_level and isinstance(logging.getLevelName(raw_level), int):
        return raw_level
    return default_level


def setup_logging(default_level: str | int = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """Point the root logger at a JSON handler; called repeatedly it only refreshes formatters."""
    root = logging.getLogger()
    root.setLevel(_resolve_level(default_level))

    # Existing stream handlers (e.g. pytest's capture handlers) are reused, not duplicated
    existing = [handler for handler in root.handlers if isinstance(handler, logging.StreamHandler)]
    for handler in existing:
        handler.setFormatter(JsonFormatter())
    if existing:
        return

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
