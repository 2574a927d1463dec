"""In-memory user store.

The store is the sole authority over user records:
- Records live in an insertion-ordered ``dict`` keyed by id.
- Every operation runs under one re-entrant lock, so id uniqueness holds
  under a threaded WSGI server.
- Ids are random UUID4 strings; collisions are not checked.

Matching policy
---------------
``update`` and ``delete`` locate existing records by id. Whether that match
ignores case is configurable per operation. By default ``update`` ignores
case and ``delete`` does not. ``get_by_id`` is always an exact match.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from uuid import uuid4

from user_middle.models.user import User, UserDetails


def _new_id() -> str:
    return str(uuid4())


class UserStore:
    """Thread-safe in-memory collection of :class:`User` records."""

    def __init__(
        self,
        seed: Iterable[User] = (),
        *,
        update_case_insensitive: bool = True,
        delete_case_insensitive: bool = False,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        """
        Initialize the store.

        :param seed: Records loaded at start-up. A later record with the same
            id replaces an earlier one.
        :param update_case_insensitive: Ignore case when ``update`` removes the
            previous record.
        :param delete_case_insensitive: Ignore case when ``delete`` removes
            records.
        :param id_factory: Callable returning fresh ids for ``create``.
        """
        self._lock = threading.RLock()
        self._users: dict[str, User] = {}
        self._id_factory = id_factory
        self.update_case_insensitive = update_case_insensitive
        self.delete_case_insensitive = delete_case_insensitive
        for user in seed:
            self._users.pop(user.id, None)
            self._users[user.id] = user

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._users

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def get_by_id(self, user_id: str) -> User | None:
        """Return the record whose id equals ``user_id`` exactly, else ``None``."""
        with self._lock:
            return self._users.get(user_id)

    def get_all(self) -> list[User]:
        """Return a snapshot of every record in collection order."""
        with self._lock:
            return list(self._users.values())

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    def create(self, details: UserDetails) -> User:
        """Store ``details`` under a freshly generated id and return the record."""
        with self._lock:
            user = User.from_details(self._id_factory(), details)
            self._users[user.id] = user
            return user

    def update(self, user_id: str, details: UserDetails | User) -> User:
        """
        Replace the record stored under ``user_id`` (upsert).

        Every record matching ``user_id`` is removed before the new record is
        appended, so the replaced record moves to the end of the collection.
        When nothing matched, the record is simply created with that id.
        An id carried by ``details`` is ignored.

        :returns: The stored record, whose id is always ``user_id``.
        """
        user, _ = self.replace(user_id, details)
        return user

    def replace(self, user_id: str, details: UserDetails | User) -> tuple[User, int]:
        """Same as :meth:`update`, also returning how many records were removed."""
        user = User.from_details(user_id, details)
        with self._lock:
            removed = self._remove_matching(user_id, case_insensitive=self.update_case_insensitive)
            self._users[user_id] = user
            return user, removed

    def delete(self, user_id: str) -> int:
        """Remove every record matching ``user_id``; return how many were removed."""
        with self._lock:
            return self._remove_matching(user_id, case_insensitive=self.delete_case_insensitive)

    def _remove_matching(self, user_id: str, *, case_insensitive: bool) -> int:
        if not case_insensitive:
            return 1 if self._users.pop(user_id, None) is not None else 0
        folded = user_id.casefold()
        matches = [key for key in self._users if key.casefold() == folded]
        for key in matches:
            del self._users[key]
        return len(matches)
