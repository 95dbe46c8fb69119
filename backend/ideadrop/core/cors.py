"""Cross-origin access for the SPA."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS


def parse_origins(raw: str | None) -> list[str]:
    """``"a, b,"`` gives ``["a", "b"]``."""
    return [o.strip() for o in (raw or "").split(",") if o.strip()]


def init_app(app: Flask) -> None:
    """Allow ``CORS_ORIGINS`` to call ``/api/*`` with credentials.

    Browsers refuse credentials with a wildcard origin, so an empty or ``*``
    setting opens every origin without the refresh cookie.
    """
    origins = parse_origins(app.config.get("CORS_ORIGINS"))
    open_to_all = origins in ([], ["*"])
    CORS(
        app,
        resources={r"/api/*": {"origins": "*" if open_to_all else origins}},
        supports_credentials=not open_to_all,
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )
