from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..database.memory import MemoryTable
from .model import Student
from .repository import StudentRepository


class InMemoryStudentRepository(StudentRepository):
    def __init__(self):
        self._table: MemoryTable[Student] = MemoryTable(Student, key_field="student_id")

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self._table.get(student_id)

    def get_by_admission_number(self, admission_number: str) -> Optional[Student]:
        return self._table.find(lambda s: s.admission_number == admission_number)

    def search(self, query: str, *, grade: Optional[str] = None) -> Sequence[Student]:
        q = (query or "").lower()

        def matches(s: Student) -> bool:
            hit = (
                q in s.student_name.lower()
                or q in s.admission_number.lower()
                or q in s.parent_name.lower()
            )
            if grade:
                return hit and s.grade == grade
            return hit

        return self._table.filter(matches)

    def list_all(self) -> Sequence[Student]:
        return self._table.all()

    def list_by_grade(self, grade: str) -> Sequence[Student]:
        return self._table.filter(lambda s: s.grade == grade)

    def list_by_route(self, route_id: int) -> Sequence[Student]:
        return self._table.filter(lambda s: s.transportation_route_id == route_id)

    def count(self) -> int:
        return len(self._table)

    def create(self, **fields: Any) -> Student:
        return self._table.insert(**fields)

    def update(self, student_id: int, changes: Mapping[str, Any]) -> Optional[Student]:
        return self._table.update(student_id, changes)

    def delete(self, student_id: int) -> bool:
        return self._table.delete(student_id)
