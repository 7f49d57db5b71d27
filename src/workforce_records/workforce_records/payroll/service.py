from __future__ import annotations

from typing import Mapping, Optional

from ..common.validators import require_rate
from ..core.exceptions import ValidationError
from ..employees.service import EmployeeDirectory
from ..time_entries.service import TimeEntryLedger
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import EmployeeMonthSummary, SalaryBreakdown


class PayrollService:
    """Tính lương tháng từ sổ giờ công. Không ghi dữ liệu.

    Đơn giá giờ do người gọi truyền vào; nếu bỏ trống thì lấy từ danh sách
    nhân viên (khi có).
    """

    def __init__(
        self,
        ledger: TimeEntryLedger,
        *,
        employees: Optional[EmployeeDirectory] = None,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._ledger = ledger
        self._employees = employees
        self._calculator = calculator or StandardPayrollCalculator()

    def _rate_for(self, employee_id: str) -> float:
        if self._employees is None:
            raise ValidationError("Thiếu đơn giá giờ")
        return self._employees.hourly_rate(employee_id)

    def calculate_salary(
        self,
        employee_id: str,
        year: int,
        month: int,
        hourly_rate: Optional[float] = None,
    ) -> SalaryBreakdown:
        if hourly_rate is None:
            hourly_rate = self._rate_for(employee_id)
        hourly_rate = require_rate(hourly_rate, "hourly_rate")

        total_hours = self._ledger.total_hours_in_month(employee_id, year, month)
        return self._calculator.breakdown(total_hours=total_hours, hourly_rate=hourly_rate)

    def monthly_summary(
        self,
        rates: Optional[Mapping[str, float]],
        year: int,
        month: int,
    ) -> list[EmployeeMonthSummary]:
        """One row per employee in `rates`, most hours first.

        Without `rates` the whole employee directory is summarised.
        """

        if not rates:
            rates = self._employees.rates() if self._employees is not None else {}

        standard = getattr(self._calculator, "standard_hours", None)
        threshold = getattr(self._calculator, "bonus_threshold", None)

        out: list[EmployeeMonthSummary] = []
        for employee_id, rate in rates.items():
            salary = self.calculate_salary(employee_id, year, month, rate)
            hours = salary.total_hours
            out.append(
                EmployeeMonthSummary(
                    employee_id=employee_id,
                    year=int(year),
                    month=int(month),
                    salary=salary,
                    below_standard=standard is not None and 0 < hours < standard,
                    bonus_eligible=threshold is not None and hours >= threshold,
                )
            )

        out.sort(key=lambda s: s.salary.total_hours, reverse=True)
        return out


def calculate_salary(
    ledger: TimeEntryLedger,
    employee_id: str,
    year: int,
    month: int,
    hourly_rate: float,
) -> SalaryBreakdown:
    """Salary breakdown using the standard policy."""

    return PayrollService(ledger).calculate_salary(employee_id, year, month, hourly_rate)
