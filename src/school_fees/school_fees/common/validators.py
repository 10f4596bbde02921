from __future__ import annotations

import dataclasses
import math
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Optional, Type

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

_TEXT_TYPES = (str, int, float)


def require_non_empty(value: str, field_name: str) -> str:
    if isinstance(value, bool) or not isinstance(value, _TEXT_TYPES):
        raise ValidationError(f"{field_name} is required")
    if not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_text(field_name: str) -> Callable[[Any], Optional[str]]:
    """Strip free text; blank or null becomes None."""

    def _coerce(value: Any) -> Optional[str]:
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValidationError(f"{field_name} must be text")
        return value.strip() or None

    return _coerce


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if not isinstance(value, str) or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_non_negative(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number")
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return number


def require_choice(value: Any, field_name: str, choices: Iterable[str]) -> str:
    choices = tuple(choices)
    if value not in choices:
        raise ValidationError(f"{field_name} must be one of: {', '.join(choices)}")
    return value


def as_date(field_name: str) -> Callable[[Any], date]:
    def _coerce(value: Any) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return parse_iso_date(str(value))
        except ValueError:
            raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")

    return _coerce


def as_enum(enum_cls: Type[Enum], field_name: str) -> Callable[[Any], Enum]:
    def _coerce(value: Any) -> Enum:
        try:
            return enum_cls(value)
        except ValueError:
            allowed = ", ".join(m.value for m in enum_cls)
            raise ValidationError(f"{field_name} must be one of: {allowed}")

    return _coerce


def as_int(field_name: str) -> Callable[[Any], int]:
    def _coerce(value: Any) -> int:
        if isinstance(value, bool):
            raise ValidationError(f"{field_name} must be an integer")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValidationError(f"{field_name} must be an integer")

    return _coerce


def optional(coerce: Callable[[Any], Any]) -> Callable[[Any], Any]:
    def _coerce(value: Any) -> Any:
        if value is None or value == "":
            return None
        return coerce(value)

    return _coerce


def clean_fields(
    model: type,
    data: Mapping[str, Any],
    *,
    coercers: Mapping[str, Callable[[Any], Any]],
    exclude: Iterable[str] = (),
    partial: bool = False,
) -> dict:
    """Check `data` against the dataclass `model` and coerce each value.

    `exclude` names fields the caller may not set (ids, timestamps). With
    `partial=True` missing required fields are allowed (used for updates).
    """
    excluded = set(exclude)
    allowed = {f.name: f for f in dataclasses.fields(model) if f.name not in excluded}

    unknown = sorted(set(data) - set(allowed))
    if unknown:
        raise ValidationError(f"Unknown field(s): {', '.join(unknown)}")

    if not partial:
        missing = [
            name
            for name, f in allowed.items()
            if name not in data
            and f.default is dataclasses.MISSING
            and f.default_factory is dataclasses.MISSING
        ]
        if missing:
            raise ValidationError(f"Missing field(s): {', '.join(missing)}")

    cleaned: dict = {}
    for name, value in data.items():
        coerce: Optional[Callable[[Any], Any]] = coercers.get(name)
        cleaned[name] = coerce(value) if coerce else value
    return cleaned
