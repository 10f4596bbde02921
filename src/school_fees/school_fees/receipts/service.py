from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import (
    as_date,
    as_enum,
    as_int,
    clean_fields,
    optional_text,
    require_non_empty,
    require_non_negative,
)
from ..core.enums import FeeType, PaymentMethod, PaymentStatus, ReceiptStatus
from ..core.exceptions import ValidationError
from ..fees.repository import FeeDueRepository
from ..settings.repository import SettingsRepository
from ..students.repository import StudentRepository
from .model import Receipt, ReceiptItem
from .repository import ReceiptItemRepository, ReceiptRepository

logger = logging.getLogger(__name__)

_RECEIPT_COERCERS = {
    "receipt_number": lambda v: require_non_empty(v, "Receipt number"),
    "student_id": as_int("Student"),
    "receipt_date": as_date("Receipt date"),
    "total_amount": lambda v: require_non_negative(v, "Total amount"),
    "payment_method": as_enum(PaymentMethod, "Payment method"),
    "status": as_enum(ReceiptStatus, "Status"),
}

_ITEM_COERCERS = {
    "receipt_id": as_int("Receipt"),
    "fee_type": as_enum(FeeType, "Fee type"),
    "description": lambda v: require_non_empty(v, "Description"),
    "amount": lambda v: require_non_negative(v, "Amount"),
    "period": lambda v: require_non_empty(v, "Period"),
}


@dataclass(frozen=True)
class IssuedReceipt:
    receipt: Receipt
    items: list[ReceiptItem]


class ReceiptService:
    """Use case: issue receipts and record fee payments."""

    def __init__(
        self,
        receipts: ReceiptRepository,
        items: ReceiptItemRepository,
        students: StudentRepository,
        fee_dues: FeeDueRepository,
        settings: SettingsRepository,
    ):
        self._receipts = receipts
        self._items = items
        self._students = students
        self._fee_dues = fee_dues
        self._settings = settings

    # Receipts
    def get_receipt(self, receipt_id: int) -> Optional[Receipt]:
        return self._receipts.get_by_id(int(receipt_id))

    def get_by_number(self, receipt_number: str) -> Optional[Receipt]:
        return self._receipts.get_by_number(receipt_number)

    def list_by_student(self, student_id: int) -> Sequence[Receipt]:
        return self._receipts.list_by_student(int(student_id))

    def create_receipt(self, data: Mapping[str, Any]) -> Receipt:
        fields = clean_fields(Receipt, data, coercers=_RECEIPT_COERCERS, exclude=("receipt_id", "created_at"))
        receipt = self._receipts.create(**fields)
        logger.info("created receipt %s (%s)", receipt.receipt_id, receipt.receipt_number)
        return receipt

    def update_receipt(self, receipt_id: int, data: Mapping[str, Any]) -> Optional[Receipt]:
        fields = clean_fields(
            Receipt, data, coercers=_RECEIPT_COERCERS, exclude=("receipt_id", "created_at"), partial=True
        )
        receipt = self._receipts.update(int(receipt_id), fields)
        if receipt:
            logger.info("updated receipt %s", receipt_id)
        return receipt

    def delete_receipt(self, receipt_id: int) -> bool:
        # Line items are left in place; there is no cascading delete.
        deleted = self._receipts.delete(int(receipt_id))
        if deleted:
            logger.info("deleted receipt %s", receipt_id)
        return deleted

    # Receipt items
    def list_items(self, receipt_id: int) -> Sequence[ReceiptItem]:
        return self._items.list_by_receipt(int(receipt_id))

    def create_item(self, data: Mapping[str, Any]) -> ReceiptItem:
        fields = clean_fields(ReceiptItem, data, coercers=_ITEM_COERCERS, exclude=("item_id",))
        item = self._items.create(**fields)
        logger.info("created receipt item %s on receipt %s", item.item_id, item.receipt_id)
        return item

    def update_item(self, item_id: int, data: Mapping[str, Any]) -> Optional[ReceiptItem]:
        fields = clean_fields(ReceiptItem, data, coercers=_ITEM_COERCERS, exclude=("item_id",), partial=True)
        item = self._items.update(int(item_id), fields)
        if item:
            logger.info("updated receipt item %s", item_id)
        return item

    def delete_item(self, item_id: int) -> bool:
        deleted = self._items.delete(int(item_id))
        if deleted:
            logger.info("deleted receipt item %s", item_id)
        return deleted

    # Payments
    def next_receipt_number(self) -> str:
        prefix = self._settings.get().receipt_prefix
        seq = len(self._receipts.list_all()) + 1
        while self._receipts.get_by_number(f"{prefix}{seq:04d}"):
            seq += 1
        return f"{prefix}{seq:04d}"

    def collect_fees(
        self,
        *,
        student_id: int,
        due_ids: Sequence[int],
        payment_method: str,
        payment_reference: str = "",
        remarks: str = "",
        receipt_date: Optional[date] = None,
    ) -> IssuedReceipt:
        """Pay off the given dues in full with a single receipt."""
        student = self._students.get_by_id(as_int("Student")(student_id))
        if not student:
            raise ValidationError("Student not found")
        if not isinstance(due_ids, (list, tuple)):
            raise ValidationError("Fee dues must be a list of ids")
        if not due_ids:
            raise ValidationError("Select at least one fee due to pay")

        method = as_enum(PaymentMethod, "Payment method")(payment_method)

        dues = []
        for due_id in dict.fromkeys(as_int("Fee due")(d) for d in due_ids):
            due = self._fee_dues.get_by_id(due_id)
            if not due or due.student_id != student.student_id:
                raise ValidationError(f"Fee due {due_id} not found for this student")
            if due.status == PaymentStatus.PAID:
                raise ValidationError(f"Fee due {due_id} is already paid")
            dues.append(due)

        receipt = self._receipts.create(
            receipt_number=self.next_receipt_number(),
            student_id=student.student_id,
            receipt_date=receipt_date or today_local(),
            total_amount=sum(d.balance for d in dues),
            payment_method=method,
            payment_reference=optional_text("Payment reference")(payment_reference),
            remarks=optional_text("Remarks")(remarks),
            status=ReceiptStatus.COMPLETED,
        )

        items = []
        for due in dues:
            items.append(
                self._items.create(
                    receipt_id=receipt.receipt_id,
                    fee_type=due.fee_type,
                    description=due.description,
                    amount=due.balance,
                    period=due.period,
                )
            )
            self._fee_dues.update(due.due_id, {"status": PaymentStatus.PAID, "amount_paid": due.amount})

        logger.info(
            "collected %.2f from student %s on receipt %s",
            receipt.total_amount,
            student.student_id,
            receipt.receipt_number,
        )
        return IssuedReceipt(receipt=receipt, items=items)
