from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: Student.

    Plain data object; `transportation_route_id` references a
    TransportationRoute when the student takes the school bus.
    """

    student_id: int
    admission_number: str
    student_name: str
    grade: str
    section: str
    roll_number: int
    parent_name: str
    contact_number: str
    fee_category: str
    admission_date: date
    email: Optional[str] = None
    transportation_route_id: Optional[int] = None
    pickup_point: Optional[str] = None


@dataclass(frozen=True)
class SchoolClass:
    """A selectable class (one per grade) for search forms."""

    class_id: int
    name: str
    grade: str


@dataclass(frozen=True)
class SearchCriteria:
    """Filters collected by the receipt search form; `None` means "any"."""

    class_id: Optional[int] = None
    section: Optional[str] = None
    admission_number: Optional[str] = None

    def is_empty(self) -> bool:
        return self.class_id is None and not self.section and not self.admission_number
