"""Structured Logging — one JSON object per line for the todo service.

Invariants:
    - Every line carries timestamp, level, logger, service and message
    - List-query context (sort_key, sort_direction, page, size) and the
      todo_id of writes are copied from `extra=` when present
    - Reconfiguring replaces the service handler instead of stacking a second one

Design Decisions:
    - stdlib logging + a small formatter: uvicorn and SQLAlchemy log through it too
    - fmt="text" for local runs and tests, "json" for deployed containers
"""

import json
import logging
from datetime import datetime, timezone

SERVICE_NAME = "todo-api"

EXTRA_FIELDS = (
    "todo_id", "error_code", "path",
    "sort_key", "sort_direction", "page", "size",
)

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    def __init__(self, service: str = SERVICE_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "message": record.getMessage(),
        }
        payload.update(
            (key, getattr(record, key))
            for key in EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class _ServiceHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the service handler on the root logger and set its level."""
    handler = _ServiceHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _ServiceHandler)]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
