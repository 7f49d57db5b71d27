from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.date_ranges import in_range, week_bounds
from ..common.datetime_utils import DateLike, parse_hhmm, to_date
from ..common.ids import new_id
from ..common.record_store import RecordStore
from ..common.validators import require_enum, require_non_empty, require_text
from ..core.constants import DAY_OFF_PLACEHOLDER_TIME
from ..core.enums import ShiftType
from ..core.exceptions import ValidationError
from .model import UPDATABLE_FIELDS, ScheduleEntry

logger = logging.getLogger(__name__)


def _sort_key(entry: ScheduleEntry):
    return entry.work_date, entry.start_time, entry.employee_id


class ScheduleBoard(RecordStore[ScheduleEntry]):
    """Bảng phân ca. Chỉ quản trị viên tạo/sửa/xoá (caller's responsibility)."""

    id_attr = "schedule_id"
    label = "Lịch làm"
    updatable_fields = UPDATABLE_FIELDS

    @staticmethod
    def _checked(entry: ScheduleEntry) -> ScheduleEntry:
        shift_type = require_enum(ShiftType, entry.shift_type, "shiftType")
        start_time = require_text(entry.start_time, "startTime")
        end_time = require_text(entry.end_time, "endTime")

        if shift_type == ShiftType.DAY_OFF:
            start_time = start_time or DAY_OFF_PLACEHOLDER_TIME
            end_time = end_time or DAY_OFF_PLACEHOLDER_TIME
        elif parse_hhmm(start_time) >= parse_hhmm(end_time):
            raise ValidationError("Giờ bắt đầu phải nhỏ hơn giờ kết thúc")

        return ScheduleEntry(
            schedule_id=entry.schedule_id,
            employee_id=require_non_empty(entry.employee_id, "employeeId"),
            work_date=to_date(entry.work_date),
            shift_type=shift_type,
            start_time=start_time,
            end_time=end_time,
            created_by=require_non_empty(entry.created_by, "createdBy"),
            created_at=entry.created_at,
        )

    def add(
        self,
        *,
        employee_id: str,
        work_date: DateLike,
        shift_type: ShiftType | str,
        start_time: str,
        end_time: str,
        created_by: str,
    ) -> ScheduleEntry:
        entry = self._checked(
            ScheduleEntry(
                schedule_id=new_id(),
                employee_id=employee_id,
                work_date=work_date,
                shift_type=shift_type,
                start_time=start_time,
                end_time=end_time,
                created_by=created_by,
                created_at=self._clock(),
            )
        )
        self._put(entry)
        logger.info("schedule %s added for %s on %s (%s)", entry.schedule_id, entry.employee_id, entry.work_date, entry.shift_type.value)
        return entry

    def update(self, schedule_id: str, changes: Mapping[str, Any]) -> None:
        current = self.get(schedule_id)
        self._put(self._checked(self._merge(current, changes)))
        logger.info("schedule %s updated (%s)", schedule_id, ", ".join(sorted(changes)))

    def delete(self, schedule_id: str) -> None:
        """Remove an assignment. Removing an id that is already gone is a no-op."""

        if self._remove(schedule_id):
            logger.info("schedule %s deleted", schedule_id)

    def by_user(self, employee_id: str) -> list[ScheduleEntry]:
        """Ordered by (date, startTime)."""

        return sorted((s for s in self._records.values() if s.employee_id == employee_id), key=_sort_key)

    def by_date_range(self, start: DateLike, end: DateLike) -> list[ScheduleEntry]:
        """Entries dated within [start, end], both ends inclusive, ordered by (date, startTime, employeeId)."""

        first, last = to_date(start), to_date(end)
        return sorted((s for s in self._records.values() if in_range(s.work_date, first, last)), key=_sort_key)

    def by_week(self, anchor: DateLike) -> list[ScheduleEntry]:
        start, end = week_bounds(anchor)
        return self.by_date_range(start, end)

    def for_user_by_week(self, employee_id: str, anchor: DateLike) -> list[ScheduleEntry]:
        return [s for s in self.by_week(anchor) if s.employee_id == employee_id]

    def for_user_on(self, employee_id: str, day: DateLike) -> list[ScheduleEntry]:
        target = to_date(day)
        return [s for s in self.for_user_by_week(employee_id, target) if s.work_date == target]
