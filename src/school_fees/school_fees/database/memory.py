from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class MemoryTable(Generic[T]):
    """In-memory stand-in for a database table.

    Records are frozen dataclasses keyed by an integer id taken from
    `key_field`. Ids are minted sequentially from 1 and never reused.
    """

    def __init__(self, model: Callable[..., T], *, key_field: str):
        self._model = model
        self._key_field = key_field
        self._rows: Dict[int, T] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._rows)

    def insert(self, **fields: Any) -> T:
        row_id = self._next_id
        record = self._model(**{self._key_field: row_id}, **fields)
        self._next_id += 1
        self._rows[row_id] = record
        return record

    def get(self, row_id: int) -> Optional[T]:
        return self._rows.get(row_id)

    def all(self) -> List[T]:
        return list(self._rows.values())

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [r for r in self._rows.values() if predicate(r)]

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        return next((r for r in self._rows.values() if predicate(r)), None)

    def update(self, row_id: int, changes: Mapping[str, Any]) -> Optional[T]:
        existing = self._rows.get(row_id)
        if existing is None:
            logger.debug("update miss on %s id=%s", self._key_field, row_id)
            return None

        # The key is fixed for the life of the record.
        changes = {k: v for k, v in changes.items() if k != self._key_field}
        updated = dataclasses.replace(existing, **changes)
        self._rows[row_id] = updated
        return updated

    def delete(self, row_id: int) -> bool:
        return self._rows.pop(row_id, None) is not None
