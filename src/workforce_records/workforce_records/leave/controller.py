from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from .model import LeaveRequest
from .service import duration_days


def register(app: Flask, container: Container) -> None:
    def _to_json(req: LeaveRequest) -> dict:
        return {**req.to_record(), "durationDays": duration_days(req)}

    @app.route("/api/leave-requests", methods=["POST"], endpoint="leave_submit")
    def leave_submit():
        body = request.get_json(silent=True) or {}
        req = container.leave_requests.submit(
            employee_id=body.get("employeeId", ""),
            start_date=body.get("startDate", ""),
            end_date=body.get("endDate", ""),
            leave_type=body.get("type", ""),
            reason=body.get("reason", ""),
        )
        return jsonify(_to_json(req)), 201

    @app.route("/api/leave-requests", methods=["GET"], endpoint="leave_list")
    def leave_list():
        status = request.args.get("status")
        if status:
            requests = container.leave_requests.by_status(status)
        else:
            requests = container.leave_requests.by_user(request.args.get("employee_id", ""))
        return jsonify([_to_json(r) for r in requests])

    @app.route("/api/leave-requests/status-counts", methods=["GET"], endpoint="leave_status_counts")
    def leave_status_counts():
        counts = container.leave_requests.status_counts(request.args.get("employee_id") or None)
        return jsonify({status.value: n for status, n in counts.items()})

    @app.route("/api/leave-requests/<request_id>/approve", methods=["POST"], endpoint="leave_approve")
    def leave_approve(request_id: str):
        body = request.get_json(silent=True) or {}
        container.leave_requests.approve(request_id, body.get("reviewerId", ""), body.get("comment"))
        return jsonify(_to_json(container.leave_requests.get(request_id)))

    @app.route("/api/leave-requests/<request_id>/reject", methods=["POST"], endpoint="leave_reject")
    def leave_reject(request_id: str):
        body = request.get_json(silent=True) or {}
        container.leave_requests.reject(request_id, body.get("reviewerId", ""), body.get("comment"))
        return jsonify(_to_json(container.leave_requests.get(request_id)))

    @app.route("/api/leave-requests/<request_id>", methods=["DELETE"], endpoint="leave_withdraw")
    def leave_withdraw(request_id: str):
        container.leave_requests.withdraw(request_id)
        return "", 204
