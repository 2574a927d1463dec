"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app

from user_middle.api.deps import json_response, timing
from user_middle.core.extensions import get_user_store

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return application health and the number of stored users."""

    payload = {
        "status": "ok",
        "users": len(get_user_store()),
        "version": current_app.config.get("APP_VERSION", "dev"),
    }
    return json_response(payload)
