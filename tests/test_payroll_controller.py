from __future__ import annotations

import io

import pandas as pd
import pytest

from shift_payroll.main import create_app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app()
    return app.test_client()


def _body(**overrides):
    body = {
        "shifts": [
            {"id": 1, "date": "2025-01-06", "startTime": "07:00", "endTime": "17:00", "approved": True},
            {
                "id": 2,
                "date": "2025-01-07",
                "startTime": "09:00",
                "endTime": "17:00",
                "breakStart": "2025-01-07T12:00:00",
                "breakEnd": "2025-01-07T12:30:00",
            },
            {"id": 3, "date": "2025-01-08", "startTime": "09:00", "endTime": None},
        ],
        "wageConfig": {"mode": "HOURLY", "hourlyRate": 20},
        "period": {"name": "Week 2", "startDate": "2025-01-06", "endDate": "2025-01-12"},
    }
    body.update(overrides)
    return body


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_calculate_hours(client):
    resp = client.post("/api/payroll/calculate-hours", json=_body())

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["totalShifts"] == 2
    assert data["totalHours"] == 17.5
    assert data["regularHours"] == 15.5
    assert data["overtimeHours"] == 2.0
    assert data["regularRate"] == 20
    assert data["overtimeRate"] == 30
    assert data["grossPay"] == 15.5 * 20 + 2 * 30
    assert data["wageCalculationMethod"] == "employeeGroup"
    assert data["shiftDetails"][1]["breakDuration"] == 30
    assert data["shiftDetails"][1]["breakStart"] == "12:00"


def test_calculate_hours_with_per_day_rule(client):
    body = _body(
        shifts=[
            {"date": "2025-01-06", "startTime": "06:00", "endTime": "11:00"},
            {"date": "2025-01-06", "startTime": "14:00", "endTime": "19:00"},
        ],
        overtimeRule="per_day",
    )

    data = client.post("/api/payroll/calculate-hours", json=body).get_json()

    assert data["regularHours"] == 8.0
    assert data["overtimeHours"] == 2.0


@pytest.mark.parametrize(
    "body",
    [
        {"shifts": "nope"},
        _body(wageConfig=None),
        _body(wageConfig={"mode": "WEEKLY"}),
        _body(wageConfig={"mode": "HOURLY", "hourlyRate": -3}),
        _body(shifts=[{"date": "2025-01-06", "startTime": "25:00", "endTime": "17:00"}]),
        _body(overtimeRule="monthly"),
    ],
)
def test_calculate_hours_bad_input_is_400(client, body):
    resp = client.post("/api/payroll/calculate-hours", json=body)

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_non_json_body_is_400(client):
    resp = client.post("/api/payroll/calculate-hours", data="x", content_type="text/plain")
    assert resp.status_code == 400


def test_entry_preview(client):
    body = {
        "employeeId": "emp-1",
        "payrollPeriodId": "p-1",
        "regularHours": 8,
        "overtimeHours": 2,
        "regularRate": 20,
        "overtimeRate": 30,
        "bonuses": 15,
        "deductions": 40,
    }

    data = client.post("/api/payroll/entries/preview", json=body).get_json()

    assert data["grossPay"] == 235
    assert data["netPay"] == 195
    assert data["status"] == "DRAFT"


def test_entry_preview_requires_ids(client):
    resp = client.post("/api/payroll/entries/preview", json={"regularHours": 1})
    assert resp.status_code == 400


def test_export_returns_workbook(client):
    resp = client.post("/api/payroll/export", json=_body())

    assert resp.status_code == 200
    assert resp.mimetype == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    sheets = pd.read_excel(io.BytesIO(resp.data), sheet_name=None)
    assert len(sheets["Shifts"]) == 2


def test_mixed_offset_break_is_400(client):
    body = _body(
        shifts=[
            {
                "date": "2025-01-06",
                "startTime": "09:00",
                "endTime": "17:00",
                "breakStart": "2025-01-06T12:00:00Z",
                "breakEnd": "2025-01-06T12:30:00",
            }
        ]
    )

    resp = client.post("/api/payroll/calculate-hours", json=body)

    assert resp.status_code == 400
    assert "UTC offset" in resp.get_json()["error"]


def test_string_false_break_paid_still_deducts_break(client):
    body = _body(
        shifts=[
            {
                "date": "2025-01-06",
                "startTime": "09:00",
                "endTime": "17:00",
                "breakStart": "2025-01-06T12:00:00",
                "breakEnd": "2025-01-06T12:30:00",
                "breakPaid": "false",
                "approved": "true",
            }
        ]
    )

    data = client.post("/api/payroll/calculate-hours", json=body).get_json()

    assert data["totalHours"] == 7.5
