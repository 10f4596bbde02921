from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.datetime_utils import now_local
from ..database.memory import MemoryTable
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self._table: MemoryTable[User] = MemoryTable(User, key_field="user_id")

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._table.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self._table.find(lambda u: u.username == username)

    def create(self, **fields: Any) -> User:
        return self._table.insert(**fields, created_at=now_local())

    def update(self, user_id: int, changes: Mapping[str, Any]) -> Optional[User]:
        return self._table.update(user_id, changes)

    def delete(self, user_id: int) -> bool:
        return self._table.delete(user_id)
