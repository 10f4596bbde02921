from __future__ import annotations

from datetime import date

import pytest

from src.school_fees.school_fees.core.enums import FeeType, PaymentMethod, PaymentStatus, ReceiptStatus
from src.school_fees.school_fees.core.exceptions import ValidationError


def _receipt(**overrides):
    data = {
        "receipt_number": "REC0001",
        "student_id": 1,
        "receipt_date": "2023-05-12",
        "total_amount": 4200,
        "payment_method": "Cash",
    }
    data.update(overrides)
    return data


def test_receipt_round_trip_and_merge(container):
    svc = container.receipt_service

    receipt = svc.create_receipt(_receipt())
    assert receipt.status == ReceiptStatus.COMPLETED
    assert receipt.created_at is not None
    assert svc.get_by_number("REC0001") == receipt

    updated = svc.update_receipt(receipt.receipt_id, {"remarks": "Paid at counter"})
    assert updated.remarks == "Paid at counter"
    assert updated.total_amount == 4200
    assert updated.created_at == receipt.created_at

    assert svc.delete_receipt(receipt.receipt_id) is True
    assert svc.get_receipt(receipt.receipt_id) is None


def test_create_receipt_rejects_unknown_payment_method(container):
    with pytest.raises(ValidationError):
        container.receipt_service.create_receipt(_receipt(payment_method="Barter"))


def test_receipt_items_belong_to_their_receipt(container):
    svc = container.receipt_service
    first = svc.create_receipt(_receipt())
    second = svc.create_receipt(_receipt(receipt_number="REC0002"))

    item = svc.create_item(
        {"receipt_id": first.receipt_id, "fee_type": "Sports", "description": "Sports Fee", "amount": 500, "period": "2023-2024"}
    )
    svc.create_item(
        {"receipt_id": second.receipt_id, "fee_type": "Library", "description": "Library Fee", "amount": 500, "period": "2023-2024"}
    )

    assert [i.item_id for i in svc.list_items(first.receipt_id)] == [item.item_id]
    assert svc.update_item(item.item_id, {"amount": 450}).fee_type == FeeType.SPORTS
    assert svc.delete_item(item.item_id) is True
    assert svc.list_items(first.receipt_id) == []


def test_collect_fees_issues_receipt_and_settles_dues(seeded, fixed_today):
    student = seeded.students_repo.get_by_admission_number("ADM2023042")
    dues = seeded.fee_due_service.list_by_student(student.student_id)
    library, transport = dues[1], dues[4]

    issued = seeded.receipt_service.collect_fees(
        student_id=student.student_id,
        due_ids=[library.due_id, transport.due_id],
        payment_method="UPI",
        payment_reference=" UPI-991 ",
        receipt_date=fixed_today,
    )

    assert issued.receipt.receipt_number.startswith("GES")
    assert issued.receipt.total_amount == 1700
    assert issued.receipt.payment_method == PaymentMethod.UPI
    assert issued.receipt.payment_reference == "UPI-991"
    assert issued.receipt.receipt_date == fixed_today
    assert [i.amount for i in issued.items] == [500, 1200]
    assert seeded.fee_due_service.get_due(library.due_id).status == PaymentStatus.PAID
    assert seeded.fee_due_service.get_due(transport.due_id).amount_paid == 1200
    assert seeded.fee_due_service.outstanding_balance(student.student_id) == 3000 + 700 + 500


def test_collect_fees_rejects_other_students_due(seeded):
    other = seeded.students_repo.get_by_admission_number("ADM2023001")

    with pytest.raises(ValidationError):
        seeded.receipt_service.collect_fees(student_id=other.student_id, due_ids=[1], payment_method="Cash")


def test_collect_fees_rejects_paid_due_and_unknown_student(seeded):
    svc = seeded.receipt_service
    svc.collect_fees(student_id=1, due_ids=[1], payment_method="Cash")

    with pytest.raises(ValidationError, match="already paid"):
        svc.collect_fees(student_id=1, due_ids=[1], payment_method="Cash")
    with pytest.raises(ValidationError):
        svc.collect_fees(student_id=404, due_ids=[2], payment_method="Cash")
    with pytest.raises(ValidationError):
        svc.collect_fees(student_id=1, due_ids=[], payment_method="Cash")


def test_next_receipt_number_skips_taken_numbers(container):
    svc = container.receipt_service
    container.settings_service.update_settings({"receipt_prefix": "KTS"})
    svc.create_receipt(_receipt(receipt_number="KTS0002", receipt_date=date(2023, 5, 1)))

    assert svc.next_receipt_number() == "KTS0003"


def test_collect_fees_requires_a_list_of_due_ids(seeded):
    svc = seeded.receipt_service

    with pytest.raises(ValidationError, match="list"):
        svc.collect_fees(student_id=1, due_ids="12", payment_method="Cash")
    with pytest.raises(ValidationError, match="Fee due"):
        svc.collect_fees(student_id=1, due_ids=["one"], payment_method="Cash")

    assert all(d.status != PaymentStatus.PAID for d in seeded.fee_due_service.list_by_student(1))
    assert len(seeded.receipts_repo.list_all()) == 5


def test_collect_fees_rejects_malformed_student_and_remarks(seeded):
    svc = seeded.receipt_service

    with pytest.raises(ValidationError, match="Student"):
        svc.collect_fees(student_id="abc", due_ids=[1], payment_method="Cash")
    with pytest.raises(ValidationError, match="Student"):
        svc.collect_fees(student_id=None, due_ids=[1], payment_method="Cash")
    with pytest.raises(ValidationError, match="Remarks"):
        svc.collect_fees(student_id=1, due_ids=[1], payment_method="Cash", remarks=42)

    assert seeded.fee_due_service.list_by_student(1)[0].status == PaymentStatus.OVERDUE
