from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Sequence, TypeVar

from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall

T = TypeVar("T")


@dataclass(frozen=True)
class TableSpec:
    """Table name plus (record key, column) pairs; the first pair is the primary key."""

    table: str
    columns: tuple[tuple[str, str], ...]

    @property
    def column_names(self) -> list[str]:
        return [col for _, col in self.columns]


TIME_ENTRIES_TABLE = TableSpec(
    "time_entries",
    (
        ("id", "entry_id"),
        ("employeeId", "employee_id"),
        ("date", "work_date"),
        ("hoursWorked", "hours_worked"),
        ("project", "project"),
        ("notes", "notes"),
        ("createdAt", "created_at"),
    ),
)

SCHEDULES_TABLE = TableSpec(
    "schedules",
    (
        ("id", "schedule_id"),
        ("employeeId", "employee_id"),
        ("date", "work_date"),
        ("shiftType", "shift_type"),
        ("startTime", "start_time"),
        ("endTime", "end_time"),
        ("createdBy", "created_by"),
        ("createdAt", "created_at"),
    ),
)

LEAVE_REQUESTS_TABLE = TableSpec(
    "leave_requests",
    (
        ("id", "request_id"),
        ("employeeId", "employee_id"),
        ("startDate", "start_date"),
        ("endDate", "end_date"),
        ("type", "leave_type"),
        ("reason", "reason"),
        ("status", "status"),
        ("reviewedBy", "reviewed_by"),
        ("reviewedAt", "reviewed_at"),
        ("comments", "comments"),
        ("createdAt", "created_at"),
    ),
)

EMPLOYEES_TABLE = TableSpec(
    "employees",
    (
        ("id", "employee_id"),
        ("name", "name"),
        ("email", "email"),
        ("hourlyRate", "hourly_rate"),
        ("department", "department"),
        ("position", "position"),
        ("hireDate", "hire_date"),
    ),
)


class MySQLRecordRepository(Generic[T]):
    """Load-all/save-all over one MySQL table.

    save_all replaces the table contents inside a single transaction.
    """

    def __init__(
        self,
        conn_factory: DatabaseConnection,
        spec: TableSpec,
        *,
        decode: Callable[[dict[str, Any]], T],
        encode: Callable[[T], dict[str, Any]],
    ):
        self._conn_factory = conn_factory
        self._spec = spec
        self._decode = decode
        self._encode = encode

    def load_all(self) -> Sequence[T]:
        cols = ", ".join(self._spec.column_names)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {cols} FROM {self._spec.table}")
            rows = fetchall(cur)

        out: list[T] = []
        for r in rows:
            record = {key: r[col] for key, col in self._spec.columns if r.get(col) is not None}
            out.append(self._decode(record))
        return out

    def save_all(self, records: Iterable[T]) -> None:
        cols = ", ".join(self._spec.column_names)
        placeholders = ", ".join(["%s"] * len(self._spec.columns))
        params = []
        for rec in records:
            data = self._encode(rec)
            params.append(tuple(data.get(key) for key, _ in self._spec.columns))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {self._spec.table}")
            if params:
                cur.executemany(f"INSERT INTO {self._spec.table}({cols}) VALUES({placeholders})", params)
