from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from ..common.datetime_utils import format_instant, parse_instant, to_date


@dataclass(frozen=True)
class TimeEntry:
    """Thực thể miền (domain): Số giờ làm của một nhân viên trong một ngày."""

    entry_id: str
    employee_id: str
    work_date: date
    hours_worked: float
    created_at: datetime
    project: Optional[str] = None
    notes: Optional[str] = None

    def to_record(self) -> dict[str, Any]:
        record: dict[str, Any] = {
            "id": self.entry_id,
            "employeeId": self.employee_id,
            "date": self.work_date.isoformat(),
            "hoursWorked": self.hours_worked,
            "createdAt": format_instant(self.created_at),
        }
        if self.project is not None:
            record["project"] = self.project
        if self.notes is not None:
            record["notes"] = self.notes
        return record

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "TimeEntry":
        return cls(
            entry_id=str(record["id"]),
            employee_id=str(record.get("employeeId", record.get("userId"))),
            work_date=to_date(record["date"]),
            hours_worked=float(record["hoursWorked"]),
            created_at=parse_instant(record["createdAt"]),
            project=record.get("project"),
            notes=record.get("notes"),
        )


# Fields a caller may change through update(); keyed by record name.
UPDATABLE_FIELDS = {
    "employee_id": "employee_id",
    "employeeId": "employee_id",
    "date": "work_date",
    "work_date": "work_date",
    "hours_worked": "hours_worked",
    "hoursWorked": "hours_worked",
    "project": "project",
    "notes": "notes",
}
