from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import FeeType, PaymentMethod, ReceiptStatus


@dataclass(frozen=True)
class Receipt:
    """A record of a completed payment; line items live in ReceiptItem."""

    receipt_id: int
    receipt_number: str
    student_id: int
    receipt_date: date
    total_amount: float
    payment_method: PaymentMethod
    status: ReceiptStatus = ReceiptStatus.COMPLETED
    payment_reference: Optional[str] = None
    remarks: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class ReceiptItem:
    item_id: int
    receipt_id: int
    fee_type: FeeType
    description: str
    amount: float
    period: str


@dataclass(frozen=True)
class RecentReceipt:
    """Report row: a receipt plus the student it was issued to."""

    receipt: Receipt
    student_name: str
    grade: str
    section: str
