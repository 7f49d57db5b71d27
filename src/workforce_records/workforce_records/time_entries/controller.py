from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _int_arg(name: str) -> int:
        try:
            return int(request.args.get(name, ""))
        except ValueError:
            raise ValidationError(f"Tham số {name} không hợp lệ")

    @app.route("/api/time-entries", methods=["POST"], endpoint="time_entries_add")
    def time_entries_add():
        body = request.get_json(silent=True) or {}
        entry = container.time_entries.add(
            employee_id=body.get("employeeId", ""),
            work_date=body.get("date", ""),
            hours_worked=body.get("hoursWorked"),
            project=body.get("project"),
            notes=body.get("notes"),
        )
        return jsonify(entry.to_record()), 201

    @app.route("/api/time-entries", methods=["GET"], endpoint="time_entries_list")
    def time_entries_list():
        employee_id = request.args.get("employee_id", "")
        if request.args.get("year") or request.args.get("month"):
            entries = container.time_entries.entries_in_month(employee_id, _int_arg("year"), _int_arg("month"))
        else:
            entries = container.time_entries.entries_for_user(employee_id)
        return jsonify([e.to_record() for e in entries])

    @app.route("/api/time-entries/monthly-total", methods=["GET"], endpoint="time_entries_monthly_total")
    def time_entries_monthly_total():
        employee_id = request.args.get("employee_id", "")
        year, month = _int_arg("year"), _int_arg("month")
        total = container.time_entries.total_hours_in_month(employee_id, year, month)
        return jsonify({"employeeId": employee_id, "year": year, "month": month, "totalHours": total})

    @app.route("/api/time-entries/daily", methods=["GET"], endpoint="time_entries_daily")
    def time_entries_daily():
        employee_id = request.args.get("employee_id", "")
        days = _int_arg("days") if request.args.get("days") else 7
        rows = container.time_entries.daily_hours(employee_id, end=request.args.get("end", ""), days=days)
        return jsonify([{"date": d.isoformat(), "hours": h} for d, h in rows])

    @app.route("/api/time-entries/<entry_id>", methods=["PATCH"], endpoint="time_entries_update")
    def time_entries_update(entry_id: str):
        body = request.get_json(silent=True) or {}
        container.time_entries.update(entry_id, body)
        return jsonify(container.time_entries.get(entry_id).to_record())

    @app.route("/api/time-entries/<entry_id>", methods=["DELETE"], endpoint="time_entries_delete")
    def time_entries_delete(entry_id: str):
        container.time_entries.delete(entry_id)
        return "", 204
