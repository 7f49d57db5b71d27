from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from ..common.datetime_utils import format_instant, parse_instant, to_date
from ..core.enums import ShiftType


@dataclass(frozen=True)
class ScheduleEntry:
    """Phân ca: nhân viên làm ca `shift_type` vào ngày `work_date`.

    `start_time`/`end_time` are local "HH:MM" strings; day-off entries carry
    placeholder times.
    """

    schedule_id: str
    employee_id: str
    work_date: date
    shift_type: ShiftType
    start_time: str
    end_time: str
    created_by: str
    created_at: datetime

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.schedule_id,
            "employeeId": self.employee_id,
            "date": self.work_date.isoformat(),
            "shiftType": self.shift_type.value,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "createdBy": self.created_by,
            "createdAt": format_instant(self.created_at),
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "ScheduleEntry":
        return cls(
            schedule_id=str(record["id"]),
            employee_id=str(record.get("employeeId", record.get("userId"))),
            work_date=to_date(record["date"]),
            shift_type=ShiftType(record["shiftType"]),
            start_time=str(record["startTime"]),
            end_time=str(record["endTime"]),
            created_by=str(record["createdBy"]),
            created_at=parse_instant(record["createdAt"]),
        )


UPDATABLE_FIELDS = {
    "employee_id": "employee_id",
    "employeeId": "employee_id",
    "date": "work_date",
    "work_date": "work_date",
    "shift_type": "shift_type",
    "shiftType": "shift_type",
    "start_time": "start_time",
    "startTime": "start_time",
    "end_time": "end_time",
    "endTime": "end_time",
    "created_by": "created_by",
    "createdBy": "created_by",
}
