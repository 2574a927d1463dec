"""
UserService
===========

Application service for user records. Keeps the HTTP layer free of store
details and logs every mutation.

Absence is a normal outcome: lookups return ``None`` instead of raising.
"""

from __future__ import annotations

import logging

from user_middle.models.user import User, UserDetails
from user_middle.store.user_store import UserStore

log = logging.getLogger(__name__)


class UserService:
    """Coordinate user-centric use cases on top of a :class:`UserStore`."""

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def get_user(self, user_id: str) -> User | None:
        """Return the user stored under ``user_id`` or ``None``."""
        return self.store.get_by_id(user_id)

    def list_users(self) -> list[User]:
        """Return every stored user."""
        return self.store.get_all()

    def create_user(self, details: UserDetails) -> User:
        """
        Create a user with a server-assigned id.

        :param details: Validated user payload.
        :type details: UserDetails
        :returns: The stored record.
        :rtype: User
        """
        user = self.store.create(details)
        log.info("user.created", extra={"user_id": user.id})
        return user

    def replace_user(self, user_id: str, details: UserDetails) -> User:
        """
        Replace (or insert) the user stored under ``user_id``.

        :param user_id: Identifier taken from the request path.
        :type user_id: str
        :param details: Validated user payload; any id it carried is ignored.
        :type details: UserDetails
        :returns: The stored record.
        :rtype: User
        """
        user, removed = self.store.replace(user_id, details)
        log.info(
            "user.updated",
            extra={"user_id": user_id, "removed": removed, "inserted": removed == 0},
        )
        return user

    def delete_user(self, user_id: str) -> int:
        """Delete every user matching ``user_id`` and return how many were removed."""
        removed = self.store.delete(user_id)
        log.info("user.deleted", extra={"user_id": user_id, "removed": removed})
        return removed
