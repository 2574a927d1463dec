"""CORS configuration helper for API resources."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS


def init_app(app: Flask) -> None:
    """Configure CORS for the user and health routes.

    Parameters
    ----------
    app: flask.Flask
        Application whose ``CORS_ORIGINS``, ``CORS_MAX_AGE`` and
        ``API_BASE_PREFIX`` settings are consulted. When ``CORS_ORIGINS`` is
        blank or ``"*"`` any origin is allowed without credential support.
    """
    raw_origins = app.config.get("CORS_ORIGINS", "")
    origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
    wildcard = len(origins) == 0 or origins == ["*"]

    prefix = app.config.get("API_BASE_PREFIX", "").rstrip("/")
    resource_options = {"origins": "*" if wildcard else origins}
    CORS(
        app,
        resources={
            rf"{prefix}/user.*": resource_options,
            rf"{prefix}/health": resource_options,
        },
        supports_credentials=not wildcard,
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )
