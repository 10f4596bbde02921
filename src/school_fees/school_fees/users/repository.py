from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Services depend on this interface, not on a concrete store.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def create(self, **fields: Any) -> User:
        raise NotImplementedError

    def update(self, user_id: int, changes: Mapping[str, Any]) -> Optional[User]:
        raise NotImplementedError

    def delete(self, user_id: int) -> bool:
        raise NotImplementedError
