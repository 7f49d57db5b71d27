from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import to_date


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Nhân viên và đơn giá giờ dùng cho tính lương."""

    employee_id: str
    name: str
    hourly_rate: float
    email: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    hire_date: Optional[date] = None

    def to_record(self) -> dict[str, Any]:
        record: dict[str, Any] = {
            "id": self.employee_id,
            "name": self.name,
            "hourlyRate": self.hourly_rate,
        }
        for key, value in (("email", self.email), ("department", self.department), ("position", self.position)):
            if value is not None:
                record[key] = value
        if self.hire_date is not None:
            record["hireDate"] = self.hire_date.isoformat()
        return record

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Employee":
        hire_date = record.get("hireDate")
        return cls(
            employee_id=str(record["id"]),
            name=str(record["name"]),
            hourly_rate=float(record["hourlyRate"]),
            email=record.get("email"),
            department=record.get("department"),
            position=record.get("position"),
            hire_date=to_date(hire_date) if hire_date else None,
        )


UPDATABLE_FIELDS = {
    "name": "name",
    "hourly_rate": "hourly_rate",
    "hourlyRate": "hourly_rate",
    "email": "email",
    "department": "department",
    "position": "position",
    "hire_date": "hire_date",
    "hireDate": "hire_date",
}
