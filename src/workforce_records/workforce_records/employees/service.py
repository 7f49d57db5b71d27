from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..common.datetime_utils import DateLike, to_date
from ..common.ids import new_id
from ..common.record_store import RecordStore
from ..common.validators import optional_text, require_non_empty, require_rate
from ..core.exceptions import ValidationError
from .model import UPDATABLE_FIELDS, Employee

logger = logging.getLogger(__name__)


class EmployeeDirectory(RecordStore[Employee]):
    """Danh sách nhân viên; nguồn đơn giá giờ cho bảng lương."""

    id_attr = "employee_id"
    label = "Nhân viên"
    updatable_fields = UPDATABLE_FIELDS

    @staticmethod
    def _checked(employee: Employee) -> Employee:
        return Employee(
            employee_id=employee.employee_id,
            name=require_non_empty(employee.name, "name"),
            hourly_rate=require_rate(employee.hourly_rate),
            email=optional_text(employee.email, "email"),
            department=optional_text(employee.department, "department"),
            position=optional_text(employee.position, "position"),
            hire_date=to_date(employee.hire_date) if employee.hire_date else None,
        )

    def add(
        self,
        *,
        name: str,
        hourly_rate: float,
        employee_id: Optional[str] = None,
        email: Optional[str] = None,
        department: Optional[str] = None,
        position: Optional[str] = None,
        hire_date: Optional[DateLike] = None,
    ) -> Employee:
        if employee_id is not None:
            employee_id = require_non_empty(employee_id, "id")
            if employee_id in self._records:
                raise ValidationError(f"Nhân viên đã tồn tại: {employee_id}")

        employee = self._checked(
            Employee(
                employee_id=employee_id or new_id(),
                name=name,
                hourly_rate=hourly_rate,
                email=email,
                department=department,
                position=position,
                hire_date=hire_date,
            )
        )
        self._put(employee)
        logger.info("employee %s added (%s)", employee.employee_id, employee.name)
        return employee

    def update(self, employee_id: str, changes: Mapping[str, Any]) -> None:
        current = self.get(employee_id)
        self._put(self._checked(self._merge(current, changes)))
        logger.info("employee %s updated (%s)", employee_id, ", ".join(sorted(changes)))

    def delete(self, employee_id: str) -> None:
        """Remove an employee. Removing an id that is already gone is a no-op."""

        if self._remove(employee_id):
            logger.info("employee %s deleted", employee_id)

    def all_employees(self) -> list[Employee]:
        """Ordered by name."""

        return sorted(self._records.values(), key=lambda e: (e.name.lower(), e.employee_id))

    def hourly_rate(self, employee_id: str) -> float:
        return self.get(employee_id).hourly_rate

    def rates(self) -> dict[str, float]:
        return {e.employee_id: e.hourly_rate for e in self.all_employees()}
