"""User resource schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, fields, post_load

from user_middle.models.user import User, UserDetails, UserType


class UserDetailsSchema(Schema):
    """Payload for creating or replacing a user.

    Keys are camelCase on the wire. Unknown keys, including ``id``, are
    dropped: the server assigns or forces the identifier.
    """

    class Meta:
        unknown = EXCLUDE

    first_name = fields.String(required=True, data_key="firstName")
    last_name = fields.String(required=True, data_key="lastName")
    middle_initial = fields.String(required=True, data_key="middleInitial")
    user_type = fields.Enum(UserType, required=True, data_key="userType")
    date_of_birth = fields.Date(required=True, data_key="dateOfBirth")

    @post_load
    def make_details(self, data: dict[str, Any], **_: Any) -> UserDetails:
        return UserDetails(**data)


class UserSchema(Schema):
    """Public representation of a stored user."""

    id = fields.String(required=True)
    first_name = fields.String(required=True, data_key="firstName")
    last_name = fields.String(required=True, data_key="lastName")
    middle_initial = fields.String(required=True, data_key="middleInitial")
    user_type = fields.Enum(UserType, required=True, data_key="userType")
    date_of_birth = fields.Date(required=True, data_key="dateOfBirth")

    @post_load
    def make_user(self, data: dict[str, Any], **_: Any) -> User:
        return User(**data)
