from __future__ import annotations

import pytest

from src.school_fees.school_fees.core.exceptions import ValidationError


def test_default_settings(container):
    settings = container.settings_service.get_settings()

    assert settings.receipt_prefix == "GES"
    assert settings.receipt_copies == 2
    assert settings.logo is None


def test_update_merges_into_singleton(container):
    svc = container.settings_service

    updated = svc.update_settings({"academic_year": "2026-2027", "theme": "dark"})

    assert updated.academic_year == "2026-2027"
    assert updated.theme == "dark"
    assert updated.school_name == "Krishnaveni Talent School Ramannapet"
    assert svc.get_settings() == updated


@pytest.mark.parametrize(
    "payload",
    [{"theme": "neon"}, {"receipt_copies": 0}, {"enable_sms_notifications": "on"}, {"favourite_colour": "red"}],
)
def test_update_rejects_bad_values(container, payload):
    with pytest.raises(ValidationError):
        container.settings_service.update_settings(payload)
