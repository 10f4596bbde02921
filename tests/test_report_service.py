from __future__ import annotations

from datetime import date, datetime

from src.school_fees.school_fees.core.enums import FeeType, PaymentMethod, PaymentStatus
from src.school_fees.school_fees.fees.model import FeeDue
from src.school_fees.school_fees.receipts.model import Receipt
from src.school_fees.school_fees.reports.service import ReportService
from src.school_fees.school_fees.students.model import Student


def _student(student_id: int, name: str) -> Student:
    return Student(
        student_id=student_id,
        admission_number=f"ADM{student_id:03d}",
        student_name=name,
        grade="5",
        section="A",
        roll_number=student_id,
        parent_name="Parent",
        contact_number="9000000000",
        fee_category="Regular",
        admission_date=date(2020, 4, 1),
    )


def _receipt(receipt_id: int, student_id: int, *, receipt_date: date, amount: float, created_at: datetime) -> Receipt:
    return Receipt(
        receipt_id=receipt_id,
        receipt_number=f"R{receipt_id}",
        student_id=student_id,
        receipt_date=receipt_date,
        total_amount=amount,
        payment_method=PaymentMethod.CASH,
        created_at=created_at,
    )


def _due(due_id: int, student_id: int, status: PaymentStatus) -> FeeDue:
    return FeeDue(
        due_id=due_id,
        student_id=student_id,
        fee_type=FeeType.TUITION,
        description="Tuition",
        amount=1000,
        due_date=date(2023, 5, 10),
        status=status,
        period="May 2023",
    )


class FakeStudents:
    def __init__(self, students):
        self._by_id = {s.student_id: s for s in students}

    def get_by_id(self, student_id):
        return self._by_id.get(student_id)

    def count(self):
        return len(self._by_id)


class FakeReceipts:
    def __init__(self, receipts):
        self._receipts = list(receipts)

    def list_all(self):
        return list(self._receipts)


class FakeDues:
    def __init__(self, dues):
        self._dues = list(dues)

    def list_all(self):
        return list(self._dues)


def test_recent_receipts_newest_first_with_unknown_student():
    receipts = [
        _receipt(1, 1, receipt_date=date(2023, 5, 1), amount=100, created_at=datetime(2023, 5, 1, 9, 0)),
        _receipt(2, 9, receipt_date=date(2023, 5, 2), amount=200, created_at=datetime(2023, 5, 3, 9, 0)),
        _receipt(3, 1, receipt_date=date(2023, 5, 3), amount=300, created_at=datetime(2023, 5, 2, 9, 0)),
    ]
    svc = ReportService(FakeStudents([_student(1, "Asha")]), FakeReceipts(receipts), FakeDues([]))

    rows = svc.recent_receipts(2)

    assert [r.receipt.receipt_id for r in rows] == [2, 3]
    assert rows[0].student_name == "Unknown"
    assert rows[0].section == "Unknown"
    assert rows[1].student_name == "Asha"
    assert rows[1].grade == "5"


def test_recent_receipts_ties_prefer_newest_id():
    same = datetime(2023, 5, 1, 9, 0)
    receipts = [_receipt(i, 1, receipt_date=date(2023, 5, 1), amount=1, created_at=same) for i in (1, 2, 3)]
    svc = ReportService(FakeStudents([]), FakeReceipts(receipts), FakeDues([]))

    assert [r.receipt.receipt_id for r in svc.recent_receipts(5)] == [3, 2, 1]
    assert svc.recent_receipts(0) == []


def test_defaulters_only_due_or_overdue():
    dues = [
        _due(1, 1, PaymentStatus.OVERDUE),
        _due(2, 1, PaymentStatus.PAID),
        _due(3, 2, PaymentStatus.DUE),
        _due(4, 1, PaymentStatus.PARTIAL),
    ]
    svc = ReportService(FakeStudents([_student(1, "Asha")]), FakeReceipts([]), FakeDues(dues))

    rows = svc.defaulters()

    assert [r.due.due_id for r in rows] == [1, 3]
    assert rows[0].admission_number == "ADM001"
    assert rows[1].student_name == "Unknown"
    assert rows[1].admission_number == "Unknown"


def test_dashboard_stats(fixed_today):
    receipts = [
        _receipt(1, 1, receipt_date=fixed_today, amount=5900, created_at=datetime(2023, 5, 12, 9, 0)),
        _receipt(2, 1, receipt_date=fixed_today, amount=4200, created_at=datetime(2023, 5, 12, 10, 0)),
        _receipt(3, 1, receipt_date=date(2023, 5, 11), amount=3800, created_at=datetime(2023, 5, 11, 10, 0)),
    ]
    dues = [
        _due(1, 1, PaymentStatus.OVERDUE),
        _due(2, 1, PaymentStatus.PARTIAL),
        _due(3, 1, PaymentStatus.PAID),
        _due(4, 1, PaymentStatus.DUE),
    ]
    svc = ReportService(FakeStudents([_student(1, "Asha"), _student(2, "Kiran")]), FakeReceipts(receipts), FakeDues(dues))

    stats = svc.dashboard_stats(today=fixed_today)

    assert stats.today_collection == 10100
    assert stats.receipts_generated == 3
    assert stats.pending_payments == 3
    assert stats.total_students == 2


def test_dashboard_stats_on_seed_data(seeded, fixed_today):
    stats = seeded.report_service.dashboard_stats(today=fixed_today)

    assert stats.today_collection == 5900 + 4200
    assert stats.receipts_generated == 5
    assert stats.pending_payments == 5
    assert stats.total_students == 6
