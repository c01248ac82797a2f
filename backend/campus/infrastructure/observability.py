"""Structured Logging - one JSON object per log line, or plain text for local runs.

Invariants:
    - Every line carries timestamp (record creation time, UTC), level, logger, message
    - CONTEXT_FIELDS are copied from `extra={...}` only when set
    - setup_logging() is idempotent: calling it again swaps the handler, never stacks one
    - Passwords, hashes, and tokens are never passed as extras

Design Decisions:
    - Formatter on the root logger so uvicorn, strawberry, and campus.* share one format
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = (
    "operation", "entity_kind", "entity_id", "user_id", "error_code", "path",
)

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_HANDLER_NAME = "campus"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({
            key: getattr(record, key)
            for key in CONTEXT_FIELDS
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the campus handler on the root logger."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
