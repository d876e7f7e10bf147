"""Structured logging configuration with request correlation and redaction."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Final
from uuid import uuid4

from flask import Flask, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")

#: Fixed placeholder written in place of secret values.
REDACTED: Final[str] = "********"

#: Keys whose values never reach a log line.
SECRET_KEYS: Final[frozenset[str]] = frozenset(
    {
        "password",
        "accessToken",
        "refreshToken",
        "access_token",
        "refresh_token",
    }
)

#: Structured ``extra`` attributes rendered by :class:`JSONFormatter`.
STRUCTURED_KEYS: Final[tuple[str, ...]] = ("endpoint", "elapsed_ms", "body", "errors", "user_id")


def redact(value: Any) -> Any:
    """Return a copy of ``value`` with secret entries replaced by :data:`REDACTED`.

    Mappings are walked recursively and lists/tuples element-wise. Any key
    listed in :data:`SECRET_KEYS` is replaced regardless of its value, so a
    missing or empty password is masked as well. Other values are returned
    untouched.

    :param value: Arbitrary structured payload (typically a request body).
    :returns: Redacted copy safe to log.
    """
    if isinstance(value, Mapping):
        return {
            key: REDACTED if key in SECRET_KEYS else redact(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact(item) for item in value]
    return value


class JSONFormatter(logging.Formatter):
    """Render log records as JSON objects."""

    def format(self, record: logging.LogRecord) -> str:  # pragma: no cover - formatting logic
        payload: dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for key in STRUCTURED_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload, default=str)


class RequestIdFilter(logging.Filter):
    """Ensure a ``request_id`` attribute is always present on log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover - trivial
        record.request_id = ensure_request_id() if has_request_context() else None
        return True


class RedactionFilter(logging.Filter):
    """Mask secret values carried in structured ``extra`` attributes."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key in STRUCTURED_KEYS:
            if hasattr(record, key):
                setattr(record, key, redact(getattr(record, key)))
        return True


def ensure_request_id() -> str:
    """Return the current request identifier, generating one when necessary."""

    if has_request_context():
        if hasattr(g, "request_id"):
            return g.request_id  # type: ignore[return-value]
        for header in CORRELATION_HEADERS:
            value = request.headers.get(header)
            if value:
                g.request_id = value
                return value
        request_id = str(uuid4())
        g.request_id = request_id
        return request_id
    return str(uuid4())


def configure_logging(level: str | int = "INFO") -> None:
    """Configure the root logger with JSON-formatted stdout output."""

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestIdFilter())
    handler.addFilter(RedactionFilter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    level_value: int | str = level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level_value = resolved if isinstance(resolved, int) else level.upper()
    root.setLevel(level_value)


def init_app(app: Flask) -> None:
    """Inject request-id middleware and attach filters to the app logger."""

    app.logger.addFilter(RequestIdFilter())
    app.logger.addFilter(RedactionFilter())

    @app.before_request
    def _seed_request_id() -> None:  # pragma: no cover - integration glue
        # A reused app context (test client, CLI) must not carry the last id over.
        g.pop("request_id", None)
        ensure_request_id()

    @app.after_request
    def _inject_response_header(response):  # pragma: no cover - integration glue
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        return response


__all__ = [
    "REDACTED",
    "RedactionFilter",
    "configure_logging",
    "ensure_request_id",
    "init_app",
    "redact",
]
