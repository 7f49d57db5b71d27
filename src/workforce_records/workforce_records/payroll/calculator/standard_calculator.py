from __future__ import annotations

from dataclasses import dataclass

from ...core.constants import BONUS_HOURS_THRESHOLD, BONUS_RATE, OVERTIME_MULTIPLIER, STANDARD_MONTHLY_HOURS
from ..model import SalaryBreakdown
from .base import PayrollCalculator


@dataclass(frozen=True)
class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule.

    Hours up to `standard_hours` are paid at the hourly rate, hours beyond at
    `overtime_multiplier` times the rate. Reaching `bonus_threshold` hours adds
    `bonus_rate` of total pay.
    """

    standard_hours: float = STANDARD_MONTHLY_HOURS
    overtime_multiplier: float = OVERTIME_MULTIPLIER
    bonus_threshold: float = BONUS_HOURS_THRESHOLD
    bonus_rate: float = BONUS_RATE

    def breakdown(self, *, total_hours: float, hourly_rate: float) -> SalaryBreakdown:
        regular_hours = min(total_hours, self.standard_hours)
        overtime_hours = max(0, total_hours - self.standard_hours)

        regular_pay = regular_hours * hourly_rate
        overtime_pay = overtime_hours * hourly_rate * self.overtime_multiplier
        total_pay = regular_pay + overtime_pay

        bonus = total_pay * self.bonus_rate if total_hours >= self.bonus_threshold else 0
        return SalaryBreakdown(
            regular_hours=regular_hours,
            overtime_hours=overtime_hours,
            total_hours=total_hours,
            regular_pay=regular_pay,
            overtime_pay=overtime_pay,
            total_pay=total_pay,
            bonus=bonus,
            final_total=total_pay + bonus,
        )
