from __future__ import annotations

from flask import Flask

from ..common.http import error, json_body, not_found, ok
from ..common.serialization import to_jsonable
from ..container import Container
from ..core.exceptions import AuthenticationError, ValidationError
from .model import User


def _public(user: User) -> dict:
    data = to_jsonable(user)
    data.pop("password_hash", None)
    return data


def register(app: Flask, container: Container) -> None:
    users = container.user_service

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    def create_user():
        try:
            return ok(_public(users.create_user(json_body())), 201)
        except ValidationError as e:
            return error(str(e))

    @app.route("/api/users/<int:user_id>", methods=["GET"], endpoint="get_user")
    def get_user(user_id: int):
        user = users.get_user(user_id)
        return ok(_public(user)) if user else not_found("User")

    @app.route("/api/users/username/<username>", methods=["GET"], endpoint="get_user_by_username")
    def get_user_by_username(username: str):
        user = users.get_by_username(username)
        return ok(_public(user)) if user else not_found("User")

    @app.route("/api/users/<int:user_id>", methods=["PATCH"], endpoint="update_user")
    def update_user(user_id: int):
        try:
            user = users.update_user(user_id, json_body())
        except ValidationError as e:
            return error(str(e))
        return ok(_public(user)) if user else not_found("User")

    @app.route("/api/users/<int:user_id>", methods=["DELETE"], endpoint="delete_user")
    def delete_user(user_id: int):
        return ("", 204) if users.delete_user(user_id) else not_found("User")

    @app.route("/api/auth/check", methods=["POST"], endpoint="check_credentials")
    def check_credentials():
        try:
            body = json_body()
            user = container.auth_service.authenticate(body.get("username", ""), body.get("password", ""))
        except ValidationError as e:
            return error(str(e))
        except AuthenticationError as e:
            return error(str(e), 401)
        return ok(_public(user))
