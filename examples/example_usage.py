"""Example: use the service layer directly (no Flask).

Controllers are thin; the behaviour lives in the services.
"""

from src.school_fees.school_fees.container import build_container


def main():
    container = build_container(seed=True)

    print(container.report_service.dashboard_stats())
    for row in container.report_service.defaulters():
        print(f"{row.admission_number} {row.student_name}: {row.due.description} ({row.due.status.value})")

    issued = container.receipt_service.collect_fees(student_id=1, due_ids=[5], payment_method="Cash")
    print(f"issued {issued.receipt.receipt_number} for {issued.receipt.total_amount:.2f}")


if __name__ == "__main__":
    main()
