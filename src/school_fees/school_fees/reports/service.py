from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import today_local
from ..core.constants import DEFAULT_RECENT_RECEIPTS_LIMIT, UNKNOWN
from ..core.enums import DEFAULTER_STATUSES, PENDING_STATUSES
from ..fees.model import Defaulter
from ..fees.repository import FeeDueRepository
from ..receipts.model import RecentReceipt
from ..receipts.repository import ReceiptRepository
from ..students.repository import StudentRepository


@dataclass(frozen=True)
class DashboardStats:
    today_collection: float
    receipts_generated: int
    pending_payments: int
    total_students: int


class ReportService:
    """Read-only aggregations across students, receipts and fee dues."""

    def __init__(self, students: StudentRepository, receipts: ReceiptRepository, fee_dues: FeeDueRepository):
        self._students = students
        self._receipts = receipts
        self._fee_dues = fee_dues

    def recent_receipts(self, limit: int = DEFAULT_RECENT_RECEIPTS_LIMIT) -> list[RecentReceipt]:
        ordered = sorted(
            self._receipts.list_all(),
            key=lambda r: (r.created_at is not None, r.created_at, r.receipt_id),
            reverse=True,
        )

        rows = []
        for receipt in ordered[: max(0, int(limit))]:
            student = self._students.get_by_id(receipt.student_id)
            rows.append(
                RecentReceipt(
                    receipt=receipt,
                    student_name=student.student_name if student else UNKNOWN,
                    grade=student.grade if student else UNKNOWN,
                    section=student.section if student else UNKNOWN,
                )
            )
        return rows

    def defaulters(self) -> list[Defaulter]:
        rows = []
        for due in self._fee_dues.list_all():
            if due.status not in DEFAULTER_STATUSES:
                continue
            student = self._students.get_by_id(due.student_id)
            rows.append(
                Defaulter(
                    due=due,
                    student_name=student.student_name if student else UNKNOWN,
                    grade=student.grade if student else UNKNOWN,
                    admission_number=student.admission_number if student else UNKNOWN,
                )
            )
        return rows

    def dashboard_stats(self, *, today: Optional[date] = None) -> DashboardStats:
        today = today or today_local()
        receipts = self._receipts.list_all()

        return DashboardStats(
            today_collection=sum(r.total_amount for r in receipts if r.receipt_date == today),
            receipts_generated=len(receipts),
            pending_payments=sum(1 for d in self._fee_dues.list_all() if d.status in PENDING_STATUSES),
            total_students=self._students.count(),
        )
