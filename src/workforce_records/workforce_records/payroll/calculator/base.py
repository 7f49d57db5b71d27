from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import SalaryBreakdown


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def breakdown(self, *, total_hours: float, hourly_rate: float) -> SalaryBreakdown:
        raise NotImplementedError
