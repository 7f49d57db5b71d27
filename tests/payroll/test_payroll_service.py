from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.workforce_records.workforce_records.core.exceptions import NotFoundError, ValidationError
from src.workforce_records.workforce_records.payroll.service import calculate_salary


def _log_hours(ledger, employee_id, start: date, days: int, hours: float):
    for i in range(days):
        ledger.add(employee_id=employee_id, work_date=start + timedelta(days=i), hours_worked=hours)


def test_salary_from_ledger_with_overtime_and_bonus(container):
    # 21 days x 10h = 210h in March
    _log_hours(container.time_entries, "u1", date(2024, 3, 1), 21, 10)
    # February hours must not leak into March
    container.time_entries.add(employee_id="u1", work_date="2024-02-29", hours_worked=8)

    salary = container.payroll.calculate_salary("u1", 2024, 3, 20)

    assert salary.total_hours == 210
    assert salary.overtime_hours == 50
    assert salary.total_pay == 4700
    assert salary.final_total == pytest.approx(5170)


def test_salary_without_entries_is_zero(container):
    salary = container.payroll.calculate_salary("nobody", 2024, 3, 20)

    assert salary.total_hours == 0
    assert salary.final_total == 0


def test_salary_is_read_only(container):
    container.time_entries.add(employee_id="u1", work_date="2024-03-01", hours_worked=8)
    saves = container.time_entries_repo.save_count

    first = container.payroll.calculate_salary("u1", 2024, 3, 20)
    second = container.payroll.calculate_salary("u1", 2024, 3, 20)

    assert first == second
    assert container.time_entries_repo.save_count == saves


@pytest.mark.parametrize("rate", [-1, float("nan"), float("inf"), "abc"])
def test_invalid_rate_rejected(container, rate):
    with pytest.raises(ValidationError):
        container.payroll.calculate_salary("u1", 2024, 3, rate)


def test_rate_falls_back_to_employee_directory(container):
    container.employees.add(employee_id="u1", name="An", hourly_rate=25)
    _log_hours(container.time_entries, "u1", date(2024, 3, 1), 4, 8)

    salary = container.payroll.calculate_salary("u1", 2024, 3)

    assert salary.total_pay == 800


def test_missing_rate_for_unknown_employee(container):
    with pytest.raises(NotFoundError):
        container.payroll.calculate_salary("ghost", 2024, 3)


def test_missing_rate_without_directory(container):
    with pytest.raises(ValidationError):
        calculate_salary(container.time_entries, "u1", 2024, 3, None)


def test_module_level_calculate_salary(container):
    _log_hours(container.time_entries, "u1", date(2024, 3, 1), 20, 8)

    salary = calculate_salary(container.time_entries, "u1", 2024, 3, 20)

    assert salary.total_hours == 160
    assert salary.final_total == 3200


def test_monthly_summary_flags(container):
    _log_hours(container.time_entries, "busy", date(2024, 3, 1), 25, 8)
    _log_hours(container.time_entries, "light", date(2024, 3, 1), 5, 8)

    rows = container.payroll.monthly_summary({"light": 15, "busy": 20, "idle": 10}, 2024, 3)

    assert [r.employee_id for r in rows] == ["busy", "light", "idle"]
    by_id = {r.employee_id: r for r in rows}
    assert by_id["busy"].bonus_eligible and not by_id["busy"].below_standard
    assert by_id["light"].below_standard and not by_id["light"].bonus_eligible
    assert not by_id["idle"].below_standard


def test_monthly_summary_defaults_to_directory(container):
    container.employees.add(employee_id="busy", name="Bình", hourly_rate=20)
    container.employees.add(employee_id="idle", name="An", hourly_rate=10)
    _log_hours(container.time_entries, "busy", date(2024, 3, 1), 25, 8)

    rows = container.payroll.monthly_summary(None, 2024, 3)

    assert [r.employee_id for r in rows] == ["busy", "idle"]
    assert rows[0].salary.total_pay == 4400
    assert rows[1].salary.final_total == 0
    assert rows[0].bonus_eligible
