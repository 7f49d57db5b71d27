"""Ví dụ: dùng service layer (không qua Flask).

Ghi giờ công, phân ca và tính lương tháng trên bộ nhớ tạm.
"""

from datetime import date

from src.workforce_records.workforce_records.container import build_container


def main():
    container = build_container(storage_backend="memory")
    for day in range(1, 22):
        container.time_entries.add(employee_id="2", work_date=date(2024, 3, day), hours_worked=10)

    container.schedules.add(
        employee_id="2",
        work_date=date(2024, 3, 4),
        shift_type="morning",
        start_time="08:00",
        end_time="16:00",
        created_by="1",
    )

    print(container.payroll.calculate_salary("2", 2024, 3, hourly_rate=20).to_record())
    print([s.to_record() for s in container.schedules.by_week(date(2024, 3, 6))])


if __name__ == "__main__":
    main()
