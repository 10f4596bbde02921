from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Optional

from .model import SchoolSettings
from .repository import SettingsRepository


class InMemorySettingsRepository(SettingsRepository):
    def __init__(self, initial: Optional[SchoolSettings] = None):
        self._settings = initial or SchoolSettings()

    def get(self) -> SchoolSettings:
        return self._settings

    def update(self, changes: Mapping[str, Any]) -> SchoolSettings:
        self._settings = dataclasses.replace(self._settings, **changes)
        return self._settings
