from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles."""

    ADMINISTRATOR = "Administrator"
    ACCOUNTANT = "Accountant"
    STAFF = "Staff"


class FeeType(str, Enum):
    TUITION = "Tuition"
    LIBRARY = "Library"
    LABORATORY = "Laboratory"
    SPORTS = "Sports"
    EXAMINATION = "Examination"
    TRANSPORTATION = "Transportation"
    ADMISSION = "Admission"
    OTHER = "Other"


class FeeFrequency(str, Enum):
    MONTHLY = "Monthly"
    TERM = "Term"
    ANNUAL = "Annual"
    ONE_TIME = "One-time"


class PaymentMethod(str, Enum):
    CASH = "Cash"
    ONLINE_TRANSFER = "Online Transfer"
    UPI = "UPI"
    CARD = "Credit/Debit Card"
    CHEQUE = "Cheque"


class PaymentStatus(str, Enum):
    """Status of a fee due."""

    PAID = "Paid"
    DUE = "Due"
    OVERDUE = "Overdue"
    PARTIAL = "Partial"


class ReceiptStatus(str, Enum):
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


# Dues that still count against a student.
DEFAULTER_STATUSES = frozenset({PaymentStatus.DUE, PaymentStatus.OVERDUE})
PENDING_STATUSES = frozenset({PaymentStatus.DUE, PaymentStatus.OVERDUE, PaymentStatus.PARTIAL})
