from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def get_by_admission_number(self, admission_number: str) -> Optional[Student]:
        raise NotImplementedError

    def search(self, query: str, *, grade: Optional[str] = None) -> Sequence[Student]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def list_by_grade(self, grade: str) -> Sequence[Student]:
        raise NotImplementedError

    def list_by_route(self, route_id: int) -> Sequence[Student]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def create(self, **fields: Any) -> Student:
        raise NotImplementedError

    def update(self, student_id: int, changes: Mapping[str, Any]) -> Optional[Student]:
        raise NotImplementedError

    def delete(self, student_id: int) -> bool:
        raise NotImplementedError
