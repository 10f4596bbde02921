from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import FeeDue, FeeStructureItem


class FeeStructureRepository(Protocol):
    def get_by_id(self, fee_id: int) -> Optional[FeeStructureItem]:
        raise NotImplementedError

    def list_by_grade(self, grade: str) -> Sequence[FeeStructureItem]:
        raise NotImplementedError

    def list_all(self) -> Sequence[FeeStructureItem]:
        raise NotImplementedError

    def create(self, **fields: Any) -> FeeStructureItem:
        raise NotImplementedError

    def update(self, fee_id: int, changes: Mapping[str, Any]) -> Optional[FeeStructureItem]:
        raise NotImplementedError

    def delete(self, fee_id: int) -> bool:
        raise NotImplementedError


class FeeDueRepository(Protocol):
    def get_by_id(self, due_id: int) -> Optional[FeeDue]:
        raise NotImplementedError

    def list_by_student(self, student_id: int) -> Sequence[FeeDue]:
        raise NotImplementedError

    def list_all(self) -> Sequence[FeeDue]:
        raise NotImplementedError

    def create(self, **fields: Any) -> FeeDue:
        raise NotImplementedError

    def update(self, due_id: int, changes: Mapping[str, Any]) -> Optional[FeeDue]:
        raise NotImplementedError

    def delete(self, due_id: int) -> bool:
        raise NotImplementedError
