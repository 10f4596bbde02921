from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import FeeFrequency, FeeType, PaymentStatus


@dataclass(frozen=True)
class FeeStructureItem:
    """One fee charged to every student of a grade."""

    fee_id: int
    grade: str
    fee_type: FeeType
    amount: float
    frequency: FeeFrequency
    due_day: int


@dataclass(frozen=True)
class FeeDue:
    """An outstanding payment obligation for a student."""

    due_id: int
    student_id: int
    fee_type: FeeType
    description: str
    amount: float
    due_date: date
    status: PaymentStatus
    period: str
    amount_paid: float = 0

    @property
    def balance(self) -> float:
        return max(0.0, self.amount - self.amount_paid)


@dataclass(frozen=True)
class Defaulter:
    """Report row: an unpaid due plus the student it belongs to."""

    due: FeeDue
    student_name: str
    grade: str
    admission_number: str
