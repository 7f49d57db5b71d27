from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional

from .database.connection import DBConfig, DatabaseConnection
from .database.json_repository import JsonFileRepository
from .database.memory import InMemoryRepository
from .database.mysql_record_repository import (
    EMPLOYEES_TABLE,
    LEAVE_REQUESTS_TABLE,
    SCHEDULES_TABLE,
    TIME_ENTRIES_TABLE,
    MySQLRecordRepository,
)
from .employees.model import Employee
from .employees.service import EmployeeDirectory
from .leave.model import LeaveRequest
from .leave.service import LeaveWorkflow
from .payroll.calculator.base import PayrollCalculator
from .payroll.service import PayrollService
from .schedules.model import ScheduleEntry
from .schedules.service import ScheduleBoard
from .time_entries.model import TimeEntry
from .time_entries.service import TimeEntryLedger

STORE_FILES = {
    "time_entries": "time-entries.json",
    "schedules": "schedules.json",
    "leave_requests": "leave-requests.json",
    "employees": "employees.json",
}


@dataclass(frozen=True)
class Container:
    time_entries_repo: Any
    schedules_repo: Any
    leave_requests_repo: Any
    employees_repo: Any

    time_entries: TimeEntryLedger
    schedules: ScheduleBoard
    leave_requests: LeaveWorkflow
    employees: EmployeeDirectory
    payroll: PayrollService


def _build_repos(storage_backend: str, *, data_dir: Optional[str | Path], db_config: Optional[dict]):
    models = (
        ("time_entries", TimeEntry, TIME_ENTRIES_TABLE),
        ("schedules", ScheduleEntry, SCHEDULES_TABLE),
        ("leave_requests", LeaveRequest, LEAVE_REQUESTS_TABLE),
        ("employees", Employee, EMPLOYEES_TABLE),
    )
    backend = (storage_backend or "memory").lower()

    if backend == "memory":
        return [InMemoryRepository() for _ in models]

    if backend == "json":
        if not data_dir:
            raise ValueError("DATA_DIR is required for the json storage backend")
        base = Path(data_dir)
        return [
            JsonFileRepository(base / STORE_FILES[name], decode=model.from_record, encode=model.to_record)
            for name, model, _ in models
        ]

    if backend == "mysql":
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql storage backend")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        return [
            MySQLRecordRepository(conn, spec, decode=model.from_record, encode=model.to_record)
            for _, model, spec in models
        ]

    raise ValueError(f"Unknown STORAGE_BACKEND: {storage_backend!r}")


def build_container(
    *,
    storage_backend: str = "memory",
    data_dir: Optional[str | Path] = None,
    db_config: Optional[dict] = None,
    clock: Optional[Callable[[], datetime]] = None,
    calculator: Optional[PayrollCalculator] = None,
) -> Container:
    time_entries_repo, schedules_repo, leave_requests_repo, employees_repo = _build_repos(
        storage_backend, data_dir=data_dir, db_config=db_config
    )

    time_entries = TimeEntryLedger(time_entries_repo, clock=clock)
    schedules = ScheduleBoard(schedules_repo, clock=clock)
    leave_requests = LeaveWorkflow(leave_requests_repo, clock=clock)
    employees = EmployeeDirectory(employees_repo, clock=clock)
    payroll = PayrollService(time_entries, employees=employees, calculator=calculator)

    return Container(
        time_entries_repo=time_entries_repo,
        schedules_repo=schedules_repo,
        leave_requests_repo=leave_requests_repo,
        employees_repo=employees_repo,
        time_entries=time_entries,
        schedules=schedules,
        leave_requests=leave_requests,
        employees=employees,
        payroll=payroll,
    )
