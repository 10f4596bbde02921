from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.validators import as_int, clean_fields, require_choice, require_non_empty, require_non_negative
from ..core.exceptions import ValidationError
from .model import SchoolSettings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


def _flag(name: str):
    def _coerce(value: Any) -> bool:
        if not isinstance(value, bool):
            raise ValidationError(f"{name} must be true or false")
        return value

    return _coerce


def _positive_int(name: str):
    def _coerce(value: Any) -> int:
        number = as_int(name)(value)
        if number < 1:
            raise ValidationError(f"{name} must be at least 1")
        return number

    return _coerce


_COERCERS = {
    "school_name": lambda v: require_non_empty(v, "School name"),
    "receipt_prefix": lambda v: require_non_empty(v, "Receipt prefix"),
    "enable_email_notifications": _flag("enable_email_notifications"),
    "enable_sms_notifications": _flag("enable_sms_notifications"),
    "enable_automatic_reminders": _flag("enable_automatic_reminders"),
    "reminder_days": _positive_int("Reminder days"),
    "tax_percentage": lambda v: require_non_negative(v, "Tax percentage"),
    "receipt_copies": _positive_int("Receipt copies"),
    "theme": lambda v: require_choice(v, "Theme", ("light", "dark")),
}


class SettingsService:
    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get_settings(self) -> SchoolSettings:
        return self._settings.get()

    def update_settings(self, data: Mapping[str, Any]) -> SchoolSettings:
        changes = clean_fields(SchoolSettings, data, coercers=_COERCERS, partial=True)
        settings = self._settings.update(changes)
        logger.info("updated school settings: %s", ", ".join(sorted(changes)) or "no changes")
        return settings
