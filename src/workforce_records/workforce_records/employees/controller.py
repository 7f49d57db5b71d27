from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["POST"], endpoint="employees_add")
    def employees_add():
        body = request.get_json(silent=True) or {}
        employee = container.employees.add(
            employee_id=body.get("id"),
            name=body.get("name", ""),
            hourly_rate=body.get("hourlyRate"),
            email=body.get("email"),
            department=body.get("department"),
            position=body.get("position"),
            hire_date=body.get("hireDate"),
        )
        return jsonify(employee.to_record()), 201

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        return jsonify([e.to_record() for e in container.employees.all_employees()])

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="employees_get")
    def employees_get(employee_id: str):
        return jsonify(container.employees.get(employee_id).to_record())

    @app.route("/api/employees/<employee_id>", methods=["PATCH"], endpoint="employees_update")
    def employees_update(employee_id: str):
        body = request.get_json(silent=True) or {}
        container.employees.update(employee_id, body)
        return jsonify(container.employees.get(employee_id).to_record())

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="employees_delete")
    def employees_delete(employee_id: str):
        container.employees.delete(employee_id)
        return "", 204
