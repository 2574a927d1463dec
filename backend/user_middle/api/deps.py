"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request

from user_middle.core.errors import BadRequest
from user_middle.core.extensions import get_user_store
from user_middle.services.user_service import UserService

F = TypeVar("F", bound=Callable[..., Any])


def get_user_service() -> UserService:
    """Return a service bound to the current application's store."""

    return UserService(get_user_store())


def json_body() -> Any:
    """Return the decoded JSON request body.

    A literal JSON ``null`` is returned as ``None`` so schema validation can
    reject it like any other non-object payload.

    Raises
    ------
    BadRequest
        When the body is missing or is not valid JSON.
    """

    payload = request.get_json(silent=True)
    if payload is not None:
        return payload
    if request.is_json and request.get_data(cache=True).strip() == b"null":
        return None
    raise BadRequest("Request body must be valid JSON")


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def empty_response(status: int) -> Response:
    """Return a response with no body, e.g. a 404 for a missing record."""

    return Response(status=status)


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request.endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
