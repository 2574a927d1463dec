"""Flask CLI commands for inspecting the in-memory user store."""

from __future__ import annotations

import json
import logging

import click
from flask.cli import with_appcontext

from user_middle.core.extensions import get_user_store
from user_middle.schemas import UserSchema

LOGGER = logging.getLogger(__name__)


def _echo_json(payload: object) -> None:
    click.echo(json.dumps(payload, indent=2))


@click.group("users")
def users_cli() -> None:
    """Inspect the records held by the application's user store."""


@users_cli.command("list")
@with_appcontext
def list_command() -> None:
    """Print every stored user as a JSON array."""
    users = get_user_store().get_all()
    LOGGER.debug("cli.users.list", extra={"count": len(users)})
    _echo_json(UserSchema(many=True).dump(users))


@users_cli.command("show")
@click.argument("user_id")
@with_appcontext
def show_command(user_id: str) -> None:
    """Print the user stored under USER_ID."""
    user = get_user_store().get_by_id(user_id)
    if user is None:
        raise click.ClickException(f"User not found: {user_id}")
    _echo_json(UserSchema().dump(user))
