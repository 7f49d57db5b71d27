from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schedules", methods=["POST"], endpoint="schedules_add")
    def schedules_add():
        body = request.get_json(silent=True) or {}
        entry = container.schedules.add(
            employee_id=body.get("employeeId", ""),
            work_date=body.get("date", ""),
            shift_type=body.get("shiftType", ""),
            start_time=body.get("startTime", ""),
            end_time=body.get("endTime", ""),
            created_by=body.get("createdBy", ""),
        )
        return jsonify(entry.to_record()), 201

    @app.route("/api/schedules", methods=["GET"], endpoint="schedules_list")
    def schedules_list():
        employee_id = request.args.get("employee_id")
        start, end = request.args.get("start"), request.args.get("end")
        if start or end:
            schedules = container.schedules.by_date_range(start or "", end or "")
            if employee_id:
                schedules = [s for s in schedules if s.employee_id == employee_id]
        else:
            schedules = container.schedules.by_user(employee_id or "")
        return jsonify([s.to_record() for s in schedules])

    @app.route("/api/schedules/week", methods=["GET"], endpoint="schedules_week")
    def schedules_week():
        anchor = request.args.get("date", "")
        employee_id = request.args.get("employee_id")
        if employee_id:
            schedules = container.schedules.for_user_by_week(employee_id, anchor)
        else:
            schedules = container.schedules.by_week(anchor)
        return jsonify([s.to_record() for s in schedules])

    @app.route("/api/schedules/<schedule_id>", methods=["PATCH"], endpoint="schedules_update")
    def schedules_update(schedule_id: str):
        body = request.get_json(silent=True) or {}
        container.schedules.update(schedule_id, body)
        return jsonify(container.schedules.get(schedule_id).to_record())

    @app.route("/api/schedules/<schedule_id>", methods=["DELETE"], endpoint="schedules_delete")
    def schedules_delete(schedule_id: str):
        container.schedules.delete(schedule_id)
        return "", 204
