from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..database.memory import MemoryTable
from .model import FeeDue, FeeStructureItem
from .repository import FeeDueRepository, FeeStructureRepository


class InMemoryFeeStructureRepository(FeeStructureRepository):
    def __init__(self):
        self._table: MemoryTable[FeeStructureItem] = MemoryTable(FeeStructureItem, key_field="fee_id")

    def get_by_id(self, fee_id: int) -> Optional[FeeStructureItem]:
        return self._table.get(fee_id)

    def list_by_grade(self, grade: str) -> Sequence[FeeStructureItem]:
        return self._table.filter(lambda f: f.grade == grade)

    def list_all(self) -> Sequence[FeeStructureItem]:
        return self._table.all()

    def create(self, **fields: Any) -> FeeStructureItem:
        return self._table.insert(**fields)

    def update(self, fee_id: int, changes: Mapping[str, Any]) -> Optional[FeeStructureItem]:
        return self._table.update(fee_id, changes)

    def delete(self, fee_id: int) -> bool:
        return self._table.delete(fee_id)


class InMemoryFeeDueRepository(FeeDueRepository):
    def __init__(self):
        self._table: MemoryTable[FeeDue] = MemoryTable(FeeDue, key_field="due_id")

    def get_by_id(self, due_id: int) -> Optional[FeeDue]:
        return self._table.get(due_id)

    def list_by_student(self, student_id: int) -> Sequence[FeeDue]:
        return self._table.filter(lambda d: d.student_id == student_id)

    def list_all(self) -> Sequence[FeeDue]:
        return self._table.all()

    def create(self, **fields: Any) -> FeeDue:
        return self._table.insert(**fields)

    def update(self, due_id: int, changes: Mapping[str, Any]) -> Optional[FeeDue]:
        return self._table.update(due_id, changes)

    def delete(self, due_id: int) -> bool:
        return self._table.delete(due_id)
