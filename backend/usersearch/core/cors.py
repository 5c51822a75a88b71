"""CORS configuration helper for API resources."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from usersearch.api.deps import ACCESS_TOKEN_HEADER


def init_app(app: Flask) -> None:
    """Configure CORS for API endpoints based on application config.

    Parameters
    ----------
    app: flask.Flask
        Application whose ``CORS_ORIGINS`` and ``CORS_MAX_AGE`` settings are
        consulted. When ``CORS_ORIGINS`` is blank or ``"*"`` any origin is
        allowed. Browsers must be allowed to send the ``AccessToken`` header.
    """
    raw_origins = app.config.get("CORS_ORIGINS", "")
    origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
    wildcard = len(origins) == 0 or origins == ["*"]

    CORS(
        app,
        resources={r"/api/*": {"origins": "*" if wildcard else origins}},
        allow_headers=[ACCESS_TOKEN_HEADER, "X-Request-ID", "X-Correlation-ID"],
        expose_headers=["X-Request-ID"],
        methods=["GET", "OPTIONS"],
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )
