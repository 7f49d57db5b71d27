from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Mapping, Optional

from ..common.date_ranges import in_range, month_bounds
from ..common.datetime_utils import DateLike, to_date
from ..common.ids import new_id
from ..common.record_store import RecordStore
from ..common.validators import optional_text, require_non_empty, require_positive_hours
from ..core.constants import DEFAULT_DAILY_HOURS_WINDOW
from .model import UPDATABLE_FIELDS, TimeEntry

logger = logging.getLogger(__name__)


def _sort_key(entry: TimeEntry):
    return entry.work_date, entry.created_at


class TimeEntryLedger(RecordStore[TimeEntry]):
    """Sổ giờ công: số giờ làm theo nhân viên/ngày, nguồn cho tính lương."""

    id_attr = "entry_id"
    label = "Bản ghi giờ công"
    updatable_fields = UPDATABLE_FIELDS

    def add(
        self,
        *,
        employee_id: str,
        work_date: DateLike,
        hours_worked: float,
        project: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> TimeEntry:
        entry = TimeEntry(
            entry_id=new_id(),
            employee_id=require_non_empty(employee_id, "employeeId"),
            work_date=to_date(work_date),
            hours_worked=require_positive_hours(hours_worked),
            created_at=self._clock(),
            project=optional_text(project, "project"),
            notes=optional_text(notes, "notes"),
        )
        self._put(entry)
        logger.info("time entry %s added for %s (%s, %sh)", entry.entry_id, entry.employee_id, entry.work_date, entry.hours_worked)
        return entry

    def update(self, entry_id: str, changes: Mapping[str, Any]) -> None:
        current = self.get(entry_id)
        updated = self._merge(current, changes)
        updated = TimeEntry(
            entry_id=updated.entry_id,
            employee_id=require_non_empty(updated.employee_id, "employeeId"),
            work_date=to_date(updated.work_date),
            hours_worked=require_positive_hours(updated.hours_worked),
            created_at=current.created_at,
            project=optional_text(updated.project, "project"),
            notes=optional_text(updated.notes, "notes"),
        )
        self._put(updated)
        logger.info("time entry %s updated (%s)", entry_id, ", ".join(sorted(changes)))

    def delete(self, entry_id: str) -> None:
        """Remove an entry. Removing an id that is already gone is a no-op."""

        if self._remove(entry_id):
            logger.info("time entry %s deleted", entry_id)

    def entries_for_user(self, employee_id: str) -> list[TimeEntry]:
        """All entries of one employee, ordered by (date, createdAt)."""

        return sorted((e for e in self._records.values() if e.employee_id == employee_id), key=_sort_key)

    def entries_in_month(self, employee_id: str, year: int, month: int) -> list[TimeEntry]:
        """Entries whose date falls inside the calendar month, ordered by (date, createdAt)."""

        start, end = month_bounds(year, month)
        return [e for e in self.entries_for_user(employee_id) if in_range(e.work_date, start, end)]

    def total_hours_in_month(self, employee_id: str, year: int, month: int) -> float:
        return sum((e.hours_worked for e in self.entries_in_month(employee_id, year, month)), 0.0)

    def daily_hours(
        self,
        employee_id: str,
        *,
        end: DateLike,
        days: int = DEFAULT_DAILY_HOURS_WINDOW,
    ) -> list[tuple[date, float]]:
        """Hours per calendar day for the `days` days ending at `end`, oldest first."""

        last = to_date(end)
        window = [last - timedelta(days=offset) for offset in range(int(days) - 1, -1, -1)]
        totals = {d: 0.0 for d in window}
        for e in self._records.values():
            if e.employee_id == employee_id and e.work_date in totals:
                totals[e.work_date] += e.hours_worked
        return [(d, totals[d]) for d in window]
