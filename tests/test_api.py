from __future__ import annotations

import pytest

from src.workforce_records.workforce_records.main import create_app


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()


def test_time_entry_crud_and_monthly_total(client):
    resp = client.post("/api/time-entries", json={"employeeId": "u1", "date": "2024-01-31", "hoursWorked": 5})
    assert resp.status_code == 201
    entry_id = resp.get_json()["id"]
    client.post("/api/time-entries", json={"employeeId": "u1", "date": "2024-02-01", "hoursWorked": 3})

    total = client.get("/api/time-entries/monthly-total?employee_id=u1&year=2024&month=1").get_json()
    assert total["totalHours"] == 5

    resp = client.patch(f"/api/time-entries/{entry_id}", json={"hoursWorked": 6})
    assert resp.status_code == 200
    assert resp.get_json()["hoursWorked"] == 6

    assert client.delete(f"/api/time-entries/{entry_id}").status_code == 204
    assert client.delete(f"/api/time-entries/{entry_id}").status_code == 204
    assert client.get("/api/time-entries?employee_id=u1&year=2024&month=1").get_json() == []


def test_invalid_hours_is_400(client):
    resp = client.post("/api/time-entries", json={"employeeId": "u1", "date": "2024-01-31", "hoursWorked": 0})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "ValidationError"


def test_update_unknown_entry_is_404(client):
    resp = client.patch("/api/time-entries/nope", json={"hoursWorked": 2})

    assert resp.status_code == 404
    assert resp.get_json()["error"] == "NotFoundError"


def test_salary_endpoint(client):
    for day in range(1, 21):
        client.post("/api/time-entries", json={"employeeId": "u1", "date": f"2024-03-{day:02d}", "hoursWorked": 8})

    body = client.get("/api/payroll/salary?employee_id=u1&year=2024&month=3&hourly_rate=20").get_json()

    assert body["regularHours"] == 160
    assert body["overtimeHours"] == 0
    assert body["finalTotal"] == 3200


def test_payroll_summary_endpoint(client):
    client.post("/api/time-entries", json={"employeeId": "u1", "date": "2024-03-01", "hoursWorked": 8})

    resp = client.post(
        "/api/payroll/summary",
        json={"year": 2024, "month": 3, "employees": [{"employeeId": "u1", "hourlyRate": 20}]},
    )

    [row] = resp.get_json()
    assert row["employeeId"] == "u1"
    assert row["belowStandard"] is True
    assert row["finalTotal"] == 160


def test_schedule_week_endpoint(client):
    for day, emp in (("2024-03-03", "u1"), ("2024-03-05", "u1"), ("2024-03-06", "u2")):
        resp = client.post(
            "/api/schedules",
            json={
                "employeeId": emp,
                "date": day,
                "shiftType": "morning",
                "startTime": "08:00",
                "endTime": "16:00",
                "createdBy": "admin",
            },
        )
        assert resp.status_code == 201

    week = client.get("/api/schedules/week?date=2024-03-07").get_json()
    assert [s["date"] for s in week] == ["2024-03-05", "2024-03-06"]

    mine = client.get("/api/schedules/week?date=2024-03-07&employee_id=u1").get_json()
    assert [s["employeeId"] for s in mine] == ["u1"]


def test_leave_review_flow(client):
    resp = client.post(
        "/api/leave-requests",
        json={"employeeId": "u1", "startDate": "2024-03-01", "endDate": "2024-03-03", "type": "vacation", "reason": "trip"},
    )
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["status"] == "pending"
    assert body["durationDays"] == 3

    rid = body["id"]
    resp = client.post(f"/api/leave-requests/{rid}/approve", json={"reviewerId": "admin", "comment": "ok"})
    assert resp.get_json()["status"] == "approved"

    resp = client.post(f"/api/leave-requests/{rid}/approve", json={"reviewerId": "admin"})
    assert resp.status_code == 409
    assert resp.get_json()["error"] == "InvalidStateError"

    assert client.delete(f"/api/leave-requests/{rid}").status_code == 409
    assert client.get("/api/leave-requests/status-counts").get_json() == {"pending": 0, "approved": 1, "rejected": 0}


def test_leave_end_before_start_is_400(client):
    resp = client.post(
        "/api/leave-requests",
        json={"employeeId": "u1", "startDate": "2024-03-03", "endDate": "2024-03-01", "type": "sick", "reason": ""},
    )

    assert resp.status_code == 400


def test_nan_hours_is_400(client):
    resp = client.post(
        "/api/time-entries",
        data='{"employeeId": "u1", "date": "2024-01-31", "hoursWorked": NaN}',
        content_type="application/json",
    )

    assert resp.status_code == 400
    assert client.get("/api/time-entries?employee_id=u1").get_json() == []


@pytest.mark.parametrize("query", ["year=0&month=1", "year=--2024&month=1", "year=2024&month=x", "year=10000&month=1"])
def test_bad_month_query_is_400(client, query):
    resp = client.get(f"/api/time-entries/monthly-total?employee_id=u1&{query}")

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "ValidationError"


@pytest.mark.parametrize("rate", ["nan", "inf", "-1", "abc"])
def test_bad_hourly_rate_is_400(client, rate):
    resp = client.get(f"/api/payroll/salary?employee_id=u1&year=2024&month=3&hourly_rate={rate}")

    assert resp.status_code == 400


def test_non_text_fields_are_400(client):
    resp = client.post(
        "/api/time-entries",
        json={"employeeId": "u1", "date": "2024-01-31", "hoursWorked": 4, "project": 5},
    )
    assert resp.status_code == 400

    resp = client.post(
        "/api/leave-requests",
        json={"employeeId": "u1", "startDate": "2024-03-01", "endDate": "2024-03-02", "type": "sick", "reason": 5},
    )
    assert resp.status_code == 400

    resp = client.post(
        "/api/schedules",
        json={
            "employeeId": "u1",
            "date": "2024-03-05",
            "shiftType": "morning",
            "startTime": "08:00",
            "endTime": "16:00",
            "createdBy": "admin",
        },
    )
    schedule_id = resp.get_json()["id"]
    resp = client.patch(f"/api/schedules/{schedule_id}", json={"startTime": 800})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "ValidationError"


def test_employee_roster_drives_payroll(client):
    resp = client.post("/api/employees", json={"id": "u1", "name": "Lan", "hourlyRate": 20})
    assert resp.status_code == 201
    client.post("/api/employees", json={"id": "u2", "name": "Minh", "hourlyRate": 10})
    assert client.post("/api/employees", json={"id": "u1", "name": "Lan", "hourlyRate": 20}).status_code == 400

    client.post("/api/time-entries", json={"employeeId": "u1", "date": "2024-03-01", "hoursWorked": 8})

    salary = client.get("/api/payroll/salary?employee_id=u1&year=2024&month=3").get_json()
    assert salary["finalTotal"] == 160

    rows = client.post("/api/payroll/summary", json={"year": 2024, "month": 3}).get_json()
    assert [r["employeeId"] for r in rows] == ["u1", "u2"]

    resp = client.patch("/api/employees/u2", json={"hourlyRate": 12})
    assert resp.get_json()["hourlyRate"] == 12
    assert [e["id"] for e in client.get("/api/employees").get_json()] == ["u1", "u2"]

    assert client.delete("/api/employees/u2").status_code == 204
    assert client.get("/api/employees/u2").status_code == 404
    assert client.get("/api/payroll/salary?employee_id=u2&year=2024&month=3").status_code == 404
