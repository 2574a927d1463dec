"""User endpoints."""

from __future__ import annotations

from flask import Blueprint, url_for

from user_middle.api.deps import empty_response, get_user_service, json_body, json_response, timing
from user_middle.schemas import UserDetailsSchema, UserSchema

bp = Blueprint("users", __name__)

user_schema = UserSchema()
user_list_schema = UserSchema(many=True)
user_details_schema = UserDetailsSchema()


@bp.get("")
@timing
def list_users():
    """Return every stored user."""

    users = get_user_service().list_users()
    return json_response(user_list_schema.dump(users))


@bp.get("/<user_id>")
@timing
def get_user(user_id: str):
    """Return one user, or an empty 404 when the id is unknown."""

    user = get_user_service().get_user(user_id)
    if user is None:
        return empty_response(404)
    return json_response(user_schema.dump(user))


@bp.post("")
@timing
def create_user():
    """Create a user with a server-assigned id."""

    details = user_details_schema.load(json_body())
    user = get_user_service().create_user(details)
    response = json_response(user_schema.dump(user), status=201)
    response.headers["Location"] = url_for("users.get_user", user_id=user.id)
    return response


@bp.put("/<user_id>")
@timing
def replace_user(user_id: str):
    """Replace (or insert) the user stored under ``user_id``."""

    details = user_details_schema.load(json_body())
    user = get_user_service().replace_user(user_id, details)
    return json_response(user_schema.dump(user))


@bp.delete("/<user_id>")
@timing
def delete_user(user_id: str):
    """Delete every user matching ``user_id``; succeeds even when none matched."""

    get_user_service().delete_user(user_id)
    return empty_response(204)
