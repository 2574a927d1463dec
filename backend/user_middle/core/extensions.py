"""Process-scoped service instances and initialization helpers."""

from __future__ import annotations

from flask import Flask, current_app

from user_middle.seeds import initial_users
from user_middle.store.user_store import UserStore

STORE_KEY = "user_store"


def init_app(app: Flask) -> None:
    """Create the application's user store and register it on ``app.extensions``.

    Parameters
    ----------
    app: flask.Flask
        Application whose ``USER_*`` settings drive seeding and id matching.
        Each application gets its own store; nothing is shared between
        instances created by :func:`user_middle.create_app`.
    """
    seed = initial_users(
        enabled=bool(app.config.get("USER_SEED_ENABLED", True)),
        seed_file=app.config.get("USER_SEED_FILE"),
    )
    store = UserStore(
        seed,
        update_case_insensitive=bool(app.config.get("USER_UPDATE_MATCH_CASE_INSENSITIVE", True)),
        delete_case_insensitive=bool(app.config.get("USER_DELETE_MATCH_CASE_INSENSITIVE", False)),
    )
    app.extensions[STORE_KEY] = store
    app.logger.info("user_store.ready", extra={"count": len(store)})


def get_user_store(app: Flask | None = None) -> UserStore:
    """Return the store bound to ``app`` (defaults to the current application)."""
    target = app or current_app
    store = target.extensions.get(STORE_KEY)
    if store is None:
        raise RuntimeError("User store is not initialized. Call init_app() first.")
    return store
