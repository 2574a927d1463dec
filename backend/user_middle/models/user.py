"""User record definitions for the in-memory user service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class UserType(str, Enum):
    """Role a user plays on the platform."""

    PATRON = "PATRON"
    VENUE_OWNER = "VENUE_OWNER"


@dataclass(frozen=True, slots=True)
class UserDetails:
    """
    User payload without an identifier.

    Clients submit this shape on create and replace; the store assigns or
    forces the id.

    Fields
    ------
    first_name : str
        Given name.
    last_name : str
        Family name.
    middle_initial : str
        Middle initial. One character by convention, not enforced.
    user_type : UserType
        Platform role.
    date_of_birth : datetime.date
        Calendar date of birth, no timezone.
    """

    first_name: str
    last_name: str
    middle_initial: str
    user_type: UserType
    date_of_birth: date


@dataclass(frozen=True, slots=True)
class User:
    """
    Stored user record.

    Instances are immutable, so the store can hand them to request handlers
    without exposing its internal state.
    """

    id: str
    first_name: str
    last_name: str
    middle_initial: str
    user_type: UserType
    date_of_birth: date

    @classmethod
    def from_details(cls, user_id: str, details: UserDetails | User) -> User:
        """Build a record carrying ``user_id`` and every field of ``details``.

        ``details`` may itself be a stored record; its id is discarded.
        """
        return cls(
            id=user_id,
            first_name=details.first_name,
            last_name=details.last_name,
            middle_initial=details.middle_initial,
            user_type=details.user_type,
            date_of_birth=details.date_of_birth,
        )

    @property
    def details(self) -> UserDetails:
        """Return the record's fields without the identifier."""
        return UserDetails(
            first_name=self.first_name,
            last_name=self.last_name,
            middle_initial=self.middle_initial,
            user_type=self.user_type,
            date_of_birth=self.date_of_birth,
        )
