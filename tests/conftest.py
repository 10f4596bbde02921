from __future__ import annotations

from datetime import date

import pytest

from src.school_fees.school_fees.container import build_container


@pytest.fixture
def fixed_today() -> date:
    return date(2023, 5, 12)


@pytest.fixture
def container():
    return build_container()


@pytest.fixture
def seeded():
    return build_container(seed=True)


@pytest.fixture
def student_data():
    def _make(**overrides) -> dict:
        data = {
            "admission_number": "ADM2024001",
            "student_name": "Asha Rao",
            "grade": "5",
            "section": "A",
            "roll_number": 3,
            "parent_name": "Mr. Vikram Rao",
            "contact_number": "9000000001",
            "fee_category": "Regular",
            "admission_date": "2022-04-01",
        }
        data.update(overrides)
        return data

    return _make
