from __future__ import annotations

from typing import Any, Mapping, Protocol

from .model import SchoolSettings


class SettingsRepository(Protocol):
    def get(self) -> SchoolSettings:
        raise NotImplementedError

    def update(self, changes: Mapping[str, Any]) -> SchoolSettings:
        raise NotImplementedError
