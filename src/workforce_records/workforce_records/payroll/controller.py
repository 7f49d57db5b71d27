from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _number(value, name: str, cast=float):
        try:
            return cast(value)
        except (TypeError, ValueError):
            raise ValidationError(f"Tham số {name} không hợp lệ")

    @app.route("/api/payroll/salary", methods=["GET"], endpoint="payroll_salary")
    def payroll_salary():
        employee_id = request.args.get("employee_id", "")
        hourly_rate = request.args.get("hourly_rate")
        breakdown = container.payroll.calculate_salary(
            employee_id,
            _number(request.args.get("year"), "year", int),
            _number(request.args.get("month"), "month", int),
            _number(hourly_rate, "hourly_rate") if hourly_rate is not None else None,
        )
        return jsonify({"employeeId": employee_id, **breakdown.to_record()})

    @app.route("/api/payroll/summary", methods=["POST"], endpoint="payroll_summary")
    def payroll_summary():
        body = request.get_json(silent=True) or {}
        rates = {
            str(row.get("employeeId")): _number(row.get("hourlyRate"), "hourlyRate")
            for row in body.get("employees", [])
        }
        rows = container.payroll.monthly_summary(
            rates,
            _number(body.get("year"), "year", int),
            _number(body.get("month"), "month", int),
        )
        return jsonify(
            [
                {
                    "employeeId": r.employee_id,
                    "belowStandard": r.below_standard,
                    "bonusEligible": r.bonus_eligible,
                    **r.salary.to_record(),
                }
                for r in rows
            ]
        )
