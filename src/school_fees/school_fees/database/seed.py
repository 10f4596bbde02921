from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from werkzeug.security import generate_password_hash

from ..core.constants import GRADES
from ..core.enums import FeeFrequency, FeeType, PaymentMethod, PaymentStatus, ReceiptStatus, Role

if TYPE_CHECKING:
    from ..container import Container

logger = logging.getLogger(__name__)

DEMO_ADMIN_USERNAME = "admin"
DEMO_ADMIN_PASSWORD = "admin123"


def _month_period(d: date) -> str:
    return f"{d.strftime('%B')} {d.year}"


def seed_routes(c: "Container") -> None:
    for name, description, distance, fare in (
        ("North Zone", "Covers northern residential areas including Model Town and Civil Lines", 5.2, 1200),
        ("South Zone", "Covers southern residential areas including Lajpat Nagar and GK", 7.5, 1500),
        ("East Zone", "Covers eastern residential areas including Mayur Vihar and Noida", 10.8, 1800),
        ("West Zone", "Covers western residential areas including Dwarka and Janakpuri", 8.3, 1600),
    ):
        c.routes_repo.create(route_name=name, description=description, distance=distance, fare=fare, is_active=True)


def seed_users(c: "Container") -> None:
    if c.users_repo.get_by_username(DEMO_ADMIN_USERNAME):
        return
    c.users_repo.create(
        username=DEMO_ADMIN_USERNAME,
        password_hash=generate_password_hash(DEMO_ADMIN_PASSWORD),
        role=Role.ADMINISTRATOR,
        full_name="Admin Staff",
        email="admin@school.com",
    )


def seed_students(c: "Container") -> None:
    rows = [
        ("ADM2023042", "Aditya Sharma", "5", "A", 12, "Mr. Suresh Sharma", "9876543210", "suresh@example.com",
         "Regular", None, None, date(2020, 4, 10)),
        ("ADM2023001", "Rahul Sharma", "5", "A", 1, "Mr. Ramesh Sharma", "9876543211", "ramesh@example.com",
         "Regular", None, None, date(2020, 4, 5)),
        ("ADM2023002", "Priya Patel", "3", "B", 8, "Mrs. Meena Patel", "9876543212", "meena@example.com",
         "Scholarship (25%)", 1, "Model Town Market", date(2021, 4, 15)),
        ("ADMKG0040", "Aarav Kumar", "KG", "A", 5, "Mr. Deepak Kumar", "9876543213", "deepak@example.com",
         "Regular", 2, "Lajpat Nagar Central Market", date(2022, 4, 10)),
        ("ADM7B0038", "Neha Patel", "7", "B", 14, "Mr. Rajesh Patel", "9876543214", "rajesh@example.com",
         "Regular", 3, "Mayur Vihar Metro Station", date(2019, 4, 12)),
        ("ADM10B0039", "Sneha Verma", "10", "B", 6, "Mrs. Anita Verma", "9876543215", "anita@example.com",
         "Regular", 4, "Dwarka Sector 10 Market", date(2016, 4, 8)),
    ]
    for adm, name, grade, section, roll, parent, phone, email, category, route_id, pickup, admitted in rows:
        c.students_repo.create(
            admission_number=adm,
            student_name=name,
            grade=grade,
            section=section,
            roll_number=roll,
            parent_name=parent,
            contact_number=phone,
            email=email,
            fee_category=category,
            transportation_route_id=route_id,
            pickup_point=pickup,
            admission_date=admitted,
        )


def seed_fee_structure(c: "Container") -> None:
    for grade in GRADES:
        numeric = int(grade) if grade.isdigit() else None

        # Tuition and exam fees grow with the grade.
        tuition = 2000 if grade == "Nursery" else 2200 if numeric is None else numeric * 300 + 2000
        exam = 500 if numeric is None else numeric * 100 + 400

        items = [
            (FeeType.TUITION, tuition, FeeFrequency.MONTHLY, 10),
            (FeeType.LIBRARY, 500, FeeFrequency.ANNUAL, 15),
        ]
        if numeric is not None and numeric > 3:
            items.append((FeeType.LABORATORY, 700, FeeFrequency.TERM, 15))
        items += [
            (FeeType.SPORTS, 500, FeeFrequency.ANNUAL, 15),
            (FeeType.EXAMINATION, exam, FeeFrequency.TERM, 20),
            (FeeType.TRANSPORTATION, 1200, FeeFrequency.MONTHLY, 10),
        ]
        for fee_type, amount, frequency, due_day in items:
            c.fee_structure_repo.create(
                grade=grade, fee_type=fee_type, amount=amount, frequency=frequency, due_day=due_day
            )


def seed_fee_dues(c: "Container") -> None:
    student = c.students_repo.get_by_admission_number("ADM2023042")
    if not student:
        return
    for fee_type, description, amount, due_date, status, period in (
        (FeeType.TUITION, "Tuition Fee (May 2023)", 3000, date(2023, 5, 10), PaymentStatus.OVERDUE, "May 2023"),
        (FeeType.LIBRARY, "Library Fee (Annual)", 500, date(2023, 4, 15), PaymentStatus.OVERDUE, "2023-2024"),
        (FeeType.LABORATORY, "Laboratory Fee (Term 1)", 700, date(2023, 4, 15), PaymentStatus.OVERDUE, "Term 1 2023"),
        (FeeType.SPORTS, "Sports Fee (Annual)", 500, date(2023, 4, 15), PaymentStatus.OVERDUE, "2023-2024"),
        (FeeType.TRANSPORTATION, "Transportation Fee (May 2023)", 1200, date(2023, 5, 10), PaymentStatus.DUE, "May 2023"),
    ):
        c.fee_dues_repo.create(
            student_id=student.student_id,
            fee_type=fee_type,
            description=description,
            amount=amount,
            due_date=due_date,
            status=status,
            period=period,
            amount_paid=0,
        )


def seed_receipts(c: "Container") -> None:
    student = c.students_repo.get_by_admission_number("ADM2023001")
    if student:
        receipt = c.receipts_repo.create(
            receipt_number="REC5A001",
            student_id=student.student_id,
            receipt_date=date(2023, 4, 5),
            total_amount=5900,
            payment_method=PaymentMethod.ONLINE_TRANSFER,
            payment_reference="UTR123456",
            remarks="",
            status=ReceiptStatus.COMPLETED,
        )
        for fee_type, description, amount, period in (
            (FeeType.TUITION, "Tuition Fee (April 2023)", 3000, "April 2023"),
            (FeeType.LIBRARY, "Library Fee (Annual)", 500, "2023-2024"),
            (FeeType.LABORATORY, "Laboratory Fee (Term 1)", 700, "Term 1 2023"),
            (FeeType.SPORTS, "Sports Fee (Annual)", 500, "2023-2024"),
            (FeeType.TRANSPORTATION, "Transportation Fee (April 2023)", 1200, "April 2023"),
        ):
            c.receipt_items_repo.create(
                receipt_id=receipt.receipt_id, fee_type=fee_type, description=description, amount=amount, period=period
            )

    for admission_number, receipt_number, receipt_date, amount, method in (
        ("ADM7B0038", "REC7B0038", date(2023, 5, 12), 5900, PaymentMethod.ONLINE_TRANSFER),
        ("ADM2023002", "REC3A0041", date(2023, 5, 12), 4200, PaymentMethod.CASH),
        ("ADMKG0040", "RECKG0040", date(2023, 5, 11), 3800, PaymentMethod.UPI),
        ("ADM10B0039", "REC10B0039", date(2023, 5, 10), 6700, PaymentMethod.CARD),
    ):
        student = c.students_repo.get_by_admission_number(admission_number)
        if not student:
            continue
        receipt = c.receipts_repo.create(
            receipt_number=receipt_number,
            student_id=student.student_id,
            receipt_date=receipt_date,
            total_amount=amount,
            payment_method=method,
            payment_reference=None if method == PaymentMethod.CASH else f"REF{receipt_number[3:]}",
            remarks="",
            status=ReceiptStatus.COMPLETED,
        )
        period = _month_period(receipt_date)
        # 60% tuition, 40% transportation.
        c.receipt_items_repo.create(
            receipt_id=receipt.receipt_id,
            fee_type=FeeType.TUITION,
            description=f"Tuition Fee ({period})",
            amount=amount * 0.6,
            period=period,
        )
        c.receipt_items_repo.create(
            receipt_id=receipt.receipt_id,
            fee_type=FeeType.TRANSPORTATION,
            description=f"Transportation Fee ({period})",
            amount=amount * 0.4,
            period=period,
        )


def seed_demo_data(c: "Container") -> None:
    """Populate an empty container with the demo school."""
    seed_routes(c)
    seed_users(c)
    seed_students(c)
    seed_fee_structure(c)
    seed_fee_dues(c)
    seed_receipts(c)
    logger.debug(
        "demo seed ready: %d students, %d fee items, %d receipts",
        c.students_repo.count(),
        len(c.fee_structure_repo.list_all()),
        len(c.receipts_repo.list_all()),
    )
