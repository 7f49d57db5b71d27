from __future__ import annotations

from datetime import date, datetime, time
from typing import Union

from ..core.exceptions import ValidationError

DateLike = Union[date, datetime, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: str) -> time:
    if not isinstance(value, str):
        raise ValidationError(f"Giờ không hợp lệ (HH:MM): {value!r}")
    try:
        return datetime.strptime(value.strip(), "%H:%M").time()
    except ValueError:
        raise ValidationError(f"Giờ không hợp lệ (HH:MM): {value!r}")


def to_date(value: DateLike) -> date:
    """Normalize a date, datetime or ISO string to a calendar day.

    Any time-of-day component is dropped; comparisons in the stores are on
    calendar dates only.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse_iso_date(value.strip()[:10])
        except ValueError:
            raise ValidationError(f"Ngày không hợp lệ (YYYY-MM-DD): {value!r}")
    raise ValidationError(f"Ngày không hợp lệ: {value!r}")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_instant(value: Union[datetime, str]) -> datetime:
    """Parse an ISO-8601 instant; offsets are converted to naive local time."""

    if isinstance(value, datetime):
        return value
    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    dt = datetime.fromisoformat(v)
    if dt.tzinfo is not None:
        dt = dt.astimezone().replace(tzinfo=None)
    return dt


def format_instant(value: datetime) -> str:
    return value.isoformat()
