"""Week and month windows shared by the ledger and the schedule board.

All helpers work on calendar dates (timezone-naive). Both ends of a window
are inclusive.
"""

from __future__ import annotations

import calendar
from datetime import MAXYEAR, MINYEAR, date, timedelta

from ..core.constants import WEEK_STARTS_ON
from ..core.exceptions import ValidationError
from .datetime_utils import DateLike, to_date


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of a calendar month (month is 1-indexed)."""

    if not MINYEAR <= int(year) <= MAXYEAR:
        raise ValidationError(f"Năm không hợp lệ: {year}")
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Tháng không hợp lệ: {month}")
    last_day = calendar.monthrange(int(year), int(month))[1]
    return date(int(year), int(month), 1), date(int(year), int(month), last_day)


def week_bounds(anchor: DateLike) -> tuple[date, date]:
    """Start and end day of the week containing `anchor`."""

    day = to_date(anchor)
    offset = (day.weekday() - WEEK_STARTS_ON) % 7
    start = day - timedelta(days=offset)
    return start, start + timedelta(days=6)


def in_range(day: date, start: date, end: date) -> bool:
    return start <= day <= end

