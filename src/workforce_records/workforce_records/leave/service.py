from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.datetime_utils import DateLike, to_date
from ..common.ids import new_id
from ..common.record_store import RecordStore
from ..common.validators import require_date_order, require_enum, require_non_empty, require_text
from ..core.enums import LeaveStatus, LeaveType
from ..core.exceptions import InvalidStateError
from .model import LeaveRequest

logger = logging.getLogger(__name__)


def duration_days(request: LeaveRequest) -> int:
    """Number of leave days, counting both the start and the end date."""

    return (request.end_date - request.start_date).days + 1


def _newest_first(requests) -> list[LeaveRequest]:
    return sorted(requests, key=lambda r: r.created_at, reverse=True)


class LeaveWorkflow(RecordStore[LeaveRequest]):
    """Luồng duyệt nghỉ phép: pending -> approved | rejected (terminal)."""

    id_attr = "request_id"
    label = "Yêu cầu nghỉ phép"

    def submit(
        self,
        *,
        employee_id: str,
        start_date: DateLike,
        end_date: DateLike,
        leave_type: LeaveType | str,
        reason: str,
    ) -> LeaveRequest:
        start, end = to_date(start_date), to_date(end_date)
        require_date_order(start, end)

        request = LeaveRequest(
            request_id=new_id(),
            employee_id=require_non_empty(employee_id, "employeeId"),
            start_date=start,
            end_date=end,
            leave_type=require_enum(LeaveType, leave_type, "type"),
            reason=require_text(reason, "reason"),
            status=LeaveStatus.PENDING,
            created_at=self._clock(),
        )
        self._put(request)
        logger.info("leave request %s submitted by %s (%s..%s)", request.request_id, request.employee_id, start, end)
        return request

    def _decide(self, request_id: str, status: LeaveStatus, reviewer_id: str, comment: Optional[str]) -> None:
        current = self.get(request_id)
        if current.status.is_terminal:
            raise InvalidStateError(f"Yêu cầu đã được xử lý ({current.status.value})")

        comment = require_text(comment, "comments")
        decided = replace(
            current,
            status=status,
            reviewed_by=require_non_empty(reviewer_id, "reviewedBy"),
            reviewed_at=self._clock(),
            comments=comment or current.comments,
        )
        self._put(decided)
        logger.info("leave request %s %s by %s", request_id, status.value, decided.reviewed_by)

    def approve(self, request_id: str, reviewer_id: str, comment: Optional[str] = None) -> None:
        self._decide(request_id, LeaveStatus.APPROVED, reviewer_id, comment)

    def reject(self, request_id: str, reviewer_id: str, comment: Optional[str] = None) -> None:
        self._decide(request_id, LeaveStatus.REJECTED, reviewer_id, comment)

    def withdraw(self, request_id: str) -> None:
        """Delete a pending request. An id that is already gone is a no-op."""

        current = self._records.get(str(request_id))
        if current is None:
            return
        if current.status != LeaveStatus.PENDING:
            raise InvalidStateError(f"Chỉ rút được yêu cầu đang chờ duyệt ({current.status.value})")
        self._remove(request_id)
        logger.info("leave request %s withdrawn", request_id)

    def by_user(self, employee_id: str) -> list[LeaveRequest]:
        """Newest first."""

        return _newest_first(r for r in self._records.values() if r.employee_id == employee_id)

    def by_status(self, status: LeaveStatus | str) -> list[LeaveRequest]:
        """Newest first."""

        wanted = require_enum(LeaveStatus, status, "status")
        return _newest_first(r for r in self._records.values() if r.status == wanted)

    def status_counts(self, employee_id: Optional[str] = None) -> dict[LeaveStatus, int]:
        counts = {s: 0 for s in LeaveStatus}
        for r in self._records.values():
            if employee_id is None or r.employee_id == employee_id:
                counts[r.status] += 1
        return counts

    @staticmethod
    def duration_days(request: LeaveRequest) -> int:
        return duration_days(request)
