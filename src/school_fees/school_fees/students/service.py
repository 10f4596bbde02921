from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import (
    as_date,
    as_int,
    clean_fields,
    optional,
    optional_text,
    require_choice,
    require_non_empty,
)
from ..core.constants import GRADES, SECTIONS
from ..core.exceptions import ValidationError
from .model import SchoolClass, SearchCriteria, Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)

_COERCERS = {
    "admission_number": lambda v: require_non_empty(v, "Admission number"),
    "student_name": lambda v: require_non_empty(v, "Student name"),
    "grade": lambda v: require_choice(str(v), "Grade", GRADES),
    "section": lambda v: require_choice(str(v).upper(), "Section", SECTIONS),
    "roll_number": as_int("Roll number"),
    "parent_name": lambda v: require_non_empty(v, "Parent name"),
    "contact_number": lambda v: require_non_empty(v, "Contact number"),
    "email": optional_text("Email"),
    "fee_category": lambda v: require_non_empty(v, "Fee category"),
    "admission_date": as_date("Admission date"),
    "transportation_route_id": optional(as_int("Transportation route")),
    "pickup_point": optional_text("Pickup point"),
}


def list_classes() -> list[SchoolClass]:
    """One class per grade, numbered in grade order starting at 1."""
    return [
        SchoolClass(class_id=i, name=f"Class {grade}" if grade.isdigit() else grade, grade=grade)
        for i, grade in enumerate(GRADES, start=1)
    ]


def grade_for_class(class_id: int) -> Optional[str]:
    for c in list_classes():
        if c.class_id == class_id:
            return c.grade
    return None


class StudentService:
    """Use case: manage students and look them up."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def _clean(self, data: Mapping[str, Any], *, partial: bool) -> dict:
        return clean_fields(Student, data, coercers=_COERCERS, exclude=("student_id",), partial=partial)

    def get_student(self, student_id: int) -> Optional[Student]:
        return self._students.get_by_id(int(student_id))

    def get_by_admission_number(self, admission_number: str) -> Optional[Student]:
        return self._students.get_by_admission_number(admission_number)

    def search_students(self, query: str, *, grade: Optional[str] = None) -> Sequence[Student]:
        return self._students.search(query or "", grade=grade or None)

    def list_students(self) -> Sequence[Student]:
        return self._students.list_all()

    def list_by_grade(self, grade: str) -> Sequence[Student]:
        return self._students.list_by_grade(grade)

    def list_by_route(self, route_id: int) -> Sequence[Student]:
        return self._students.list_by_route(int(route_id))

    def create_student(self, data: Mapping[str, Any]) -> Student:
        student = self._students.create(**self._clean(data, partial=False))
        logger.info("created student %s (%s)", student.student_id, student.admission_number)
        return student

    def update_student(self, student_id: int, data: Mapping[str, Any]) -> Optional[Student]:
        student = self._students.update(int(student_id), self._clean(data, partial=True))
        if student:
            logger.info("updated student %s", student_id)
        return student

    def delete_student(self, student_id: int) -> bool:
        deleted = self._students.delete(int(student_id))
        if deleted:
            logger.info("deleted student %s", student_id)
        return deleted

    def search_for_receipt(self, criteria: SearchCriteria) -> Sequence[Student]:
        """Students matching every criterion given by the receipt search form."""
        if criteria.is_empty():
            raise ValidationError("Select a class, section or admission number")

        grade = None
        if criteria.class_id is not None:
            grade = grade_for_class(criteria.class_id)
            if grade is None:
                return []

        def matches(s: Student) -> bool:
            if grade is not None and s.grade != grade:
                return False
            if criteria.section and s.section != criteria.section:
                return False
            if criteria.admission_number and s.admission_number.lower() != str(criteria.admission_number).lower():
                return False
            return True

        return [s for s in self._students.list_all() if matches(s)]
