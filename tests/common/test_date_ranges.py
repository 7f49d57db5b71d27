from datetime import date, datetime

import pytest

from src.workforce_records.workforce_records.common.date_ranges import month_bounds, week_bounds
from src.workforce_records.workforce_records.core.exceptions import ValidationError


def test_month_bounds_handles_leap_february():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(2023, 2) == (date(2023, 2, 1), date(2023, 2, 28))


def test_month_bounds_december():
    assert month_bounds(2024, 12) == (date(2024, 12, 1), date(2024, 12, 31))


@pytest.mark.parametrize("month", [0, 13])
def test_month_bounds_rejects_invalid_month(month):
    with pytest.raises(ValidationError):
        month_bounds(2024, month)


@pytest.mark.parametrize("year", [0, -1, 10000])
def test_month_bounds_rejects_year_outside_calendar(year):
    with pytest.raises(ValidationError):
        month_bounds(year, 1)


@pytest.mark.parametrize(
    "anchor",
    [date(2024, 3, 4), date(2024, 3, 6), date(2024, 3, 10), datetime(2024, 3, 10, 23, 59)],
)
def test_week_bounds_is_monday_to_sunday(anchor):
    assert week_bounds(anchor) == (date(2024, 3, 4), date(2024, 3, 10))


def test_week_bounds_crosses_year_boundary():
    assert week_bounds("2025-01-01") == (date(2024, 12, 30), date(2025, 1, 5))
