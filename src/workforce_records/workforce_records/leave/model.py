from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from ..common.datetime_utils import format_instant, parse_instant, to_date
from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    employee_id: str
    start_date: date
    end_date: date
    leave_type: LeaveType
    reason: str
    status: LeaveStatus
    created_at: datetime
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    comments: Optional[str] = None

    def to_record(self) -> dict[str, Any]:
        record: dict[str, Any] = {
            "id": self.request_id,
            "employeeId": self.employee_id,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "type": self.leave_type.value,
            "reason": self.reason,
            "status": self.status.value,
            "createdAt": format_instant(self.created_at),
        }
        if self.reviewed_by is not None:
            record["reviewedBy"] = self.reviewed_by
        if self.reviewed_at is not None:
            record["reviewedAt"] = format_instant(self.reviewed_at)
        if self.comments is not None:
            record["comments"] = self.comments
        return record

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "LeaveRequest":
        reviewed_at = record.get("reviewedAt")
        return cls(
            request_id=str(record["id"]),
            employee_id=str(record.get("employeeId", record.get("userId"))),
            start_date=to_date(record["startDate"]),
            end_date=to_date(record["endDate"]),
            leave_type=LeaveType(record["type"]),
            reason=record.get("reason") or "",
            status=LeaveStatus(record["status"]),
            created_at=parse_instant(record["createdAt"]),
            reviewed_by=record.get("reviewedBy"),
            reviewed_at=parse_instant(reviewed_at) if reviewed_at else None,
            comments=record.get("comments"),
        )
