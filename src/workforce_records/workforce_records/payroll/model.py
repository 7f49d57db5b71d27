from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class SalaryBreakdown:
    regular_hours: float
    overtime_hours: float
    total_hours: float
    regular_pay: float
    overtime_pay: float
    total_pay: float
    bonus: float
    final_total: float

    def to_record(self) -> dict[str, float]:
        names = {
            "regular_hours": "regularHours",
            "overtime_hours": "overtimeHours",
            "total_hours": "totalHours",
            "regular_pay": "regularPay",
            "overtime_pay": "overtimePay",
            "total_pay": "totalPay",
            "bonus": "bonus",
            "final_total": "finalTotal",
        }
        return {names[k]: v for k, v in asdict(self).items()}


@dataclass(frozen=True)
class EmployeeMonthSummary:
    """Read-model phục vụ bảng tổng hợp giờ công theo tháng."""

    employee_id: str
    year: int
    month: int
    salary: SalaryBreakdown
    below_standard: bool
    bonus_eligible: bool
