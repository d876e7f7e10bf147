"""CORS configuration helper for API resources."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from authservice.core.logger import REQUEST_ID_HEADER


def parse_origins(raw: str | None) -> list[str]:
    """Split a comma-separated origin list, dropping blanks."""
    return [o.strip() for o in (raw or "").split(",") if o.strip()]


def init_app(app: Flask) -> None:
    """Configure CORS for API endpoints based on application config.

    Parameters
    ----------
    app: flask.Flask
        Application whose ``CORS_ORIGINS`` and ``CORS_MAX_AGE`` settings are
        consulted.

    Notes
    -----
    Credential cookies only travel cross-origin when credentials are allowed,
    and browsers reject credentials combined with a wildcard origin. A blank
    or ``"*"`` ``CORS_ORIGINS`` therefore allows any origin without cookies;
    an explicit list allows cookies for exactly those origins.
    """
    origins = parse_origins(app.config.get("CORS_ORIGINS"))
    wildcard = not origins or origins == ["*"]

    CORS(
        app,
        resources={r"/api/*": {"origins": "*" if wildcard else origins}},
        supports_credentials=not wildcard,
        expose_headers=[REQUEST_ID_HEADER],
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )
