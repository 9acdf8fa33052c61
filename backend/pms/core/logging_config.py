"""Logging setup: JSON lines for deployments, plain text for local runs."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from pms.core.config import LogFormat, Settings
from pms.middleware.request_context import get_request_id

# Record attributes copied into the output when a call site sets them via ``extra``
DOMAIN_FIELDS = ("user_id", "property_id", "ticket_id", "application_id", "payment_id")
REQUEST_FIELDS = ("http_method", "path", "status_code", "latency_ms", "caller")


def _context(record: logging.LogRecord) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    rid = get_request_id()
    if rid:
        fields["request_id"] = rid
    for name in DOMAIN_FIELDS + REQUEST_FIELDS:
        value = getattr(record, name, None)
        if value is not None:
            fields[name] = value
    return fields


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """``LEVEL logger: message [key=value ...]``"""

    def __init__(self):
        super().__init__("%(levelname)-7s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _context(record)
        if fields:
            line += " [" + " ".join(f"{k}={v}" for k, v in fields.items()) + "]"
        return line


def configure_logging(settings: Settings) -> None:
    level = settings.log_level.upper()

    root = logging.getLogger()
    root.setLevel(level)
    # uvicorn --reload installs its own handlers
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter() if settings.log_format == LogFormat.JSON else TextFormatter())
    root.addHandler(handler)

    # The request middleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel("WARNING")
    logging.getLogger("httpx").setLevel("WARNING")
    logging.getLogger("sqlalchemy.engine").setLevel("WARNING")
