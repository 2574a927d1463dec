"""Start-up records for the in-memory user store."""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path

from marshmallow import ValidationError

from user_middle.models.user import User, UserType
from user_middle.schemas.user import UserSchema

LOGGER = logging.getLogger(__name__)

DEFAULT_USERS: tuple[User, ...] = (
    User(
        id="00000000-0000-0000-0000-000000000000",
        first_name="Smith",
        last_name="Joe",
        middle_initial="B",
        user_type=UserType.PATRON,
        date_of_birth=date(1980, 1, 1),
    ),
    User(
        id="11111111-1111-1111-1111-111111111111",
        first_name="Green",
        last_name="Anne",
        middle_initial="A",
        user_type=UserType.VENUE_OWNER,
        date_of_birth=date(1983, 2, 9),
    ),
)


class SeedError(RuntimeError):
    """Raised when a seed file cannot be read or validated."""


def load_seed_file(path: str | Path) -> list[User]:
    """Load user records from a JSON array in the public wire shape.

    Parameters
    ----------
    path:
        Location of the JSON file.

    Returns
    -------
    list[User]
        Validated records in file order.

    Raises
    ------
    SeedError
        If the file is missing, is not valid JSON, is not an array, or any
        record fails schema validation.
    """
    source = Path(path)
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SeedError(f"Cannot read seed file {str(source)!r}: {exc}") from exc
    if not isinstance(raw, list):
        raise SeedError(f"Seed file {str(source)!r} must contain a JSON array")
    try:
        users = UserSchema(many=True).load(raw)
    except ValidationError as exc:
        raise SeedError(f"Invalid records in seed file {str(source)!r}: {exc.messages}") from exc
    LOGGER.info("seed.loaded", extra={"path": str(source), "count": len(users)})
    return users


def initial_users(*, enabled: bool = True, seed_file: str | None = None) -> list[User]:
    """Return the records a new store starts with.

    A configured ``seed_file`` replaces the built-in records; ``enabled=False``
    starts empty regardless of the file.
    """
    if not enabled:
        return []
    if seed_file:
        return load_seed_file(seed_file)
    return list(DEFAULT_USERS)
