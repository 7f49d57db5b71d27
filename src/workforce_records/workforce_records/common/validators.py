from __future__ import annotations

import math
from datetime import date
from enum import Enum
from typing import Optional, TypeVar

from ..core.constants import MAX_HOURS_PER_DAY
from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} không hợp lệ")
    return str(value).strip()


def require_positive_hours(value: float, field_name: str = "hoursWorked") -> float:
    try:
        hours = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} phải là số")
    if not math.isfinite(hours) or not 0 < hours <= MAX_HOURS_PER_DAY:
        raise ValidationError(f"{field_name} phải lớn hơn 0 và không vượt quá {MAX_HOURS_PER_DAY}")
    return hours


def require_text(value: object, field_name: str) -> str:
    """Free text field; None becomes "", anything but a string is rejected."""

    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} phải là chuỗi")
    return value.strip()


def optional_text(value: object, field_name: str) -> Optional[str]:
    return require_text(value, field_name) or None


def require_rate(value: object, field_name: str = "hourlyRate") -> float:
    try:
        rate = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} phải là số")
    if not math.isfinite(rate) or rate < 0:
        raise ValidationError(f"{field_name} phải là số không âm")
    return rate


def require_date_order(start: date, end: date) -> None:
    if end < start:
        raise ValidationError("Ngày kết thúc phải >= ngày bắt đầu")


def require_enum(enum_cls: type[E], value: object, field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} không hợp lệ: {value!r} (cho phép: {allowed})")
