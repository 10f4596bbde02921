from __future__ import annotations

from dataclasses import dataclass

from .fees.memory_fee_repository import InMemoryFeeDueRepository, InMemoryFeeStructureRepository
from .fees.service import FeeDueService, FeeStructureService
from .receipts.memory_receipt_repository import InMemoryReceiptItemRepository, InMemoryReceiptRepository
from .receipts.service import ReceiptService
from .reports.service import ReportService
from .settings.memory_settings_repository import InMemorySettingsRepository
from .settings.service import SettingsService
from .students.memory_student_repository import InMemoryStudentRepository
from .students.service import StudentService
from .transport.memory_route_repository import InMemoryTransportationRouteRepository
from .transport.service import TransportationRouteService
from .users.memory_user_repository import InMemoryUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    students_repo: InMemoryStudentRepository
    fee_structure_repo: InMemoryFeeStructureRepository
    receipts_repo: InMemoryReceiptRepository
    receipt_items_repo: InMemoryReceiptItemRepository
    fee_dues_repo: InMemoryFeeDueRepository
    users_repo: InMemoryUserRepository
    routes_repo: InMemoryTransportationRouteRepository
    settings_repo: InMemorySettingsRepository

    student_service: StudentService
    fee_structure_service: FeeStructureService
    fee_due_service: FeeDueService
    receipt_service: ReceiptService
    report_service: ReportService
    user_service: UserService
    auth_service: AuthService
    route_service: TransportationRouteService
    settings_service: SettingsService


def build_container(*, seed: bool = False) -> Container:
    students_repo = InMemoryStudentRepository()
    fee_structure_repo = InMemoryFeeStructureRepository()
    receipts_repo = InMemoryReceiptRepository()
    receipt_items_repo = InMemoryReceiptItemRepository()
    fee_dues_repo = InMemoryFeeDueRepository()
    users_repo = InMemoryUserRepository()
    routes_repo = InMemoryTransportationRouteRepository()
    settings_repo = InMemorySettingsRepository()

    container = Container(
        students_repo=students_repo,
        fee_structure_repo=fee_structure_repo,
        receipts_repo=receipts_repo,
        receipt_items_repo=receipt_items_repo,
        fee_dues_repo=fee_dues_repo,
        users_repo=users_repo,
        routes_repo=routes_repo,
        settings_repo=settings_repo,
        student_service=StudentService(students_repo),
        fee_structure_service=FeeStructureService(fee_structure_repo),
        fee_due_service=FeeDueService(fee_dues_repo),
        receipt_service=ReceiptService(receipts_repo, receipt_items_repo, students_repo, fee_dues_repo, settings_repo),
        report_service=ReportService(students_repo, receipts_repo, fee_dues_repo),
        user_service=UserService(users_repo),
        auth_service=AuthService(users_repo),
        route_service=TransportationRouteService(routes_repo),
        settings_service=SettingsService(settings_repo),
    )

    if seed:
        from .database.seed import seed_demo_data

        seed_demo_data(container)

    return container
