from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import as_enum, optional_text, require_min_length, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

_EDITABLE = ("username", "password", "role", "full_name", "email")


class AuthService:
    """Use case: check a username/password pair."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> User:
        if not isinstance(username, str) or not isinstance(password, str):
            raise AuthenticationError("Invalid username or password")
        user = self._users.get_by_username(username.strip())
        if not user or not check_password_hash(user.password_hash, password):
            logger.info("failed login for %r", username)
            raise AuthenticationError("Invalid username or password")
        return user


class UserService:
    """Use case: manage staff accounts."""

    def __init__(self, users: UserRepository):
        self._users = users

    def _clean(self, data: Mapping[str, Any], *, partial: bool) -> dict:
        unknown = sorted(set(data) - set(_EDITABLE))
        if unknown:
            raise ValidationError(f"Unknown field(s): {', '.join(unknown)}")
        if not partial:
            missing = [f for f in ("username", "password", "role", "full_name") if f not in data]
            if missing:
                raise ValidationError(f"Missing field(s): {', '.join(missing)}")

        fields: dict = {}
        if "username" in data:
            fields["username"] = require_non_empty(data["username"], "Username")
        if "password" in data:
            require_min_length(data["password"], "Password", 6)
            fields["password_hash"] = generate_password_hash(data["password"])
        if "role" in data:
            fields["role"] = as_enum(Role, "Role")(data["role"])
        if "full_name" in data:
            fields["full_name"] = require_non_empty(data["full_name"], "Full name")
        if "email" in data:
            fields["email"] = optional_text("Email")(data["email"])
        return fields

    def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get_by_id(int(user_id))

    def get_by_username(self, username: str) -> Optional[User]:
        return self._users.get_by_username(username)

    def create_user(self, data: Mapping[str, Any]) -> User:
        user = self._users.create(**self._clean(data, partial=False))
        logger.info("created user %s (%s)", user.user_id, user.username)
        return user

    def update_user(self, user_id: int, data: Mapping[str, Any]) -> Optional[User]:
        user = self._users.update(int(user_id), self._clean(data, partial=True))
        if user:
            logger.info("updated user %s", user_id)
        return user

    def delete_user(self, user_id: int) -> bool:
        deleted = self._users.delete(int(user_id))
        if deleted:
            logger.info("deleted user %s", user_id)
        return deleted
