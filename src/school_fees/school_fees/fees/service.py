from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import (
    as_date,
    as_enum,
    as_int,
    clean_fields,
    require_choice,
    require_non_empty,
    require_non_negative,
)
from ..core.constants import GRADES
from ..core.enums import FeeFrequency, FeeType, PaymentStatus
from ..core.exceptions import ValidationError
from .model import FeeDue, FeeStructureItem
from .repository import FeeDueRepository, FeeStructureRepository

logger = logging.getLogger(__name__)


def _due_day(value: Any) -> int:
    day = as_int("Due day")(value)
    if not 1 <= day <= 31:
        raise ValidationError("Due day must be between 1 and 31")
    return day


_STRUCTURE_COERCERS = {
    "grade": lambda v: require_choice(str(v), "Grade", GRADES),
    "fee_type": as_enum(FeeType, "Fee type"),
    "amount": lambda v: require_non_negative(v, "Amount"),
    "frequency": as_enum(FeeFrequency, "Frequency"),
    "due_day": _due_day,
}

_DUE_COERCERS = {
    "student_id": as_int("Student"),
    "fee_type": as_enum(FeeType, "Fee type"),
    "description": lambda v: require_non_empty(v, "Description"),
    "amount": lambda v: require_non_negative(v, "Amount"),
    "due_date": as_date("Due date"),
    "status": as_enum(PaymentStatus, "Status"),
    "period": lambda v: require_non_empty(v, "Period"),
    "amount_paid": lambda v: require_non_negative(v, "Amount paid"),
}


class FeeStructureService:
    """Use case: maintain the per-grade fee schedule."""

    def __init__(self, fee_structure: FeeStructureRepository):
        self._fee_structure = fee_structure

    def get_item(self, fee_id: int) -> Optional[FeeStructureItem]:
        return self._fee_structure.get_by_id(int(fee_id))

    def list_by_grade(self, grade: str) -> Sequence[FeeStructureItem]:
        return self._fee_structure.list_by_grade(grade)

    def list_all(self) -> Sequence[FeeStructureItem]:
        return self._fee_structure.list_all()

    def create_item(self, data: Mapping[str, Any]) -> FeeStructureItem:
        fields = clean_fields(FeeStructureItem, data, coercers=_STRUCTURE_COERCERS, exclude=("fee_id",))
        item = self._fee_structure.create(**fields)
        logger.info("created fee structure item %s (%s, grade %s)", item.fee_id, item.fee_type.value, item.grade)
        return item

    def update_item(self, fee_id: int, data: Mapping[str, Any]) -> Optional[FeeStructureItem]:
        fields = clean_fields(FeeStructureItem, data, coercers=_STRUCTURE_COERCERS, exclude=("fee_id",), partial=True)
        item = self._fee_structure.update(int(fee_id), fields)
        if item:
            logger.info("updated fee structure item %s", fee_id)
        return item

    def delete_item(self, fee_id: int) -> bool:
        deleted = self._fee_structure.delete(int(fee_id))
        if deleted:
            logger.info("deleted fee structure item %s", fee_id)
        return deleted


class FeeDueService:
    """Use case: track what each student still owes."""

    def __init__(self, fee_dues: FeeDueRepository):
        self._fee_dues = fee_dues

    def get_due(self, due_id: int) -> Optional[FeeDue]:
        return self._fee_dues.get_by_id(int(due_id))

    def list_by_student(self, student_id: int) -> Sequence[FeeDue]:
        return self._fee_dues.list_by_student(int(student_id))

    def create_due(self, data: Mapping[str, Any]) -> FeeDue:
        fields = clean_fields(FeeDue, data, coercers=_DUE_COERCERS, exclude=("due_id",))
        due = self._fee_dues.create(**fields)
        logger.info("created fee due %s for student %s", due.due_id, due.student_id)
        return due

    def update_due(self, due_id: int, data: Mapping[str, Any]) -> Optional[FeeDue]:
        fields = clean_fields(FeeDue, data, coercers=_DUE_COERCERS, exclude=("due_id",), partial=True)
        due = self._fee_dues.update(int(due_id), fields)
        if due:
            logger.info("updated fee due %s", due_id)
        return due

    def delete_due(self, due_id: int) -> bool:
        deleted = self._fee_dues.delete(int(due_id))
        if deleted:
            logger.info("deleted fee due %s", due_id)
        return deleted

    def outstanding_balance(self, student_id: int) -> float:
        return sum(
            d.balance for d in self._fee_dues.list_by_student(int(student_id)) if d.status != PaymentStatus.PAID
        )
