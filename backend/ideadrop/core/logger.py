"""JSON-lines logging tagged with the correlation id of the current request."""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from flask import Flask, Response, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
INBOUND_ID_HEADERS = (REQUEST_ID_HEADER, "X-Correlation-ID")

# ``extra=`` keys attached by routes and services
CONTEXT_FIELDS = ("endpoint", "elapsed_ms", "user_id", "idea_id", "limit", "count")


def current_request_id() -> str:
    """Return the correlation id of the request being served.

    An inbound ``X-Request-ID`` (or ``X-Correlation-ID``) is reused as is;
    otherwise a UUID is minted once and kept for the rest of the request.
    Outside a request every call returns a fresh UUID.
    """
    if not has_request_context():
        return str(uuid4())
    rid = g.get("request_id")
    if rid is None:
        inbound = (request.headers.get(name) for name in INBOUND_ID_HEADERS)
        rid = next((value for value in inbound if value), None) or str(uuid4())
        g.request_id = rid
    return rid


def _tag_request_id(record: logging.LogRecord) -> bool:
    record.request_id = current_request_id() if has_request_context() else None
    return True


class JsonLineFormatter(logging.Formatter):
    """Serialize a record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        line: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        line.update(
            {field: getattr(record, field) for field in CONTEXT_FIELDS if hasattr(record, field)}
        )
        if record.exc_info:
            line["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(line, default=str)


def configure_logging(level: str | int = "INFO") -> None:
    """Send every logger's output to stdout as JSON lines at ``level``."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonLineFormatter())
    handler.addFilter(_tag_request_id)
    logging.basicConfig(
        level=level.upper() if isinstance(level, str) else level,
        handlers=[handler],
        force=True,
    )


def init_app(app: Flask) -> None:
    """Assign a request id to each request and echo it on the response."""

    @app.before_request
    def _assign_request_id() -> None:
        # ``g`` outlives the request when tests share one app context
        g.pop("request_id", None)
        current_request_id()

    @app.after_request
    def _echo_request_id(response: Response) -> Response:
        response.headers.setdefault(REQUEST_ID_HEADER, current_request_id())
        return response


__all__ = ["configure_logging", "current_request_id", "init_app"]
