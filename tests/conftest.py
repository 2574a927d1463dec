"""Global pytest fixtures for the user service."""

from __future__ import annotations

import os
import sys
from collections.abc import Generator
from pathlib import Path
from typing import Any, Callable

import pytest
from flask import Flask

# Ensure the ``backend`` package is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "backend"))

from user_middle import create_app  # noqa: E402
from user_middle.core.extensions import get_user_store  # noqa: E402
from user_middle.store.user_store import UserStore  # noqa: E402


@pytest.fixture()
def app() -> Generator[Flask, None, None]:
    """Create a Flask application with a freshly seeded store.

    Returns
    -------
    Generator[Flask, None, None]
        Configured Flask application instance.
    """

    os.environ.setdefault("APP_ENV", "testing")
    application = create_app()
    with application.app_context():
        yield application


@pytest.fixture()
def client(app: Flask) -> Any:
    """Return a Flask test client."""

    return app.test_client()


@pytest.fixture()
def store(app: Flask) -> UserStore:
    """Return the store backing ``app``."""

    return get_user_store(app)


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """

    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01")

    return _factory
