from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.timesheet.timesheet.container import build_services
from src.timesheet.timesheet.main import create_app


@pytest.fixture
def client(monkeypatch, stamps_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=build_services(stamps_repo, timezone="UTC"))
    return app.test_client()


def test_status_before_clock_in(client):
    res = client.get("/api/stamps/status")

    assert res.status_code == 200
    assert res.get_json() == {"status": "not_working", "stamp": None}


def test_clock_in_then_duplicate(client):
    first = client.post("/api/stamps/clock-in")
    second = client.post("/api/stamps/clock-in")

    assert first.status_code == 201
    stamp = first.get_json()["stamp"]
    assert stamp["clockOutAt"] is None
    assert "clockInAt" in stamp
    assert second.status_code == 400
    assert second.get_json()["error"] == "ALREADY_CLOCKED_IN"


def test_break_cycle_via_put_routes(client):
    client.post("/api/stamps/clock-in")

    assert client.put("/api/stamps/break-start").status_code == 200
    assert client.get("/api/stamps/status").get_json()["status"] == "on_break"

    blocked = client.put("/api/stamps/clock-out")
    assert blocked.status_code == 400
    assert blocked.get_json()["error"] == "STILL_ON_BREAK"
    assert "End break first" in blocked.get_json()["message"]

    assert client.put("/api/stamps/break-end").status_code == 200
    assert client.put("/api/stamps/clock-out").status_code == 200
    assert client.get("/api/stamps/status").get_json()["status"] == "clocked_out"


def test_record_action_endpoint(client):
    ok = client.post("/api/stamps", json={"action": "clock_in"})
    bad = client.post("/api/stamps", json={"action": "nap"})
    missing = client.post("/api/stamps", json={})

    assert ok.status_code == 200
    assert bad.status_code == 400
    assert bad.get_json()["error"] == "VALIDATION_ERROR"
    assert missing.status_code == 400


def test_attendance_by_date(client, stamps_repo, make_stamp):
    stamps_repo.add(
        make_stamp(
            "2026-03-02",
            datetime(2026, 3, 2, 8, tzinfo=timezone.utc),
            datetime(2026, 3, 2, 20, tzinfo=timezone.utc),
            datetime(2026, 3, 2, 12, tzinfo=timezone.utc),
            datetime(2026, 3, 2, 13, tzinfo=timezone.utc),
        )
    )

    res = client.get("/api/attendance/2026-03-02")

    assert res.status_code == 200
    record = res.get_json()["record"]
    assert record["workMinutes"] == 660
    assert record["breakMinutes"] == 60
    assert record["overtimeMinutes"] == 180
    assert record["lateNightMinutes"] == 0
    assert record["clockInAt"] == "2026-03-02T08:00:00+00:00"


def test_attendance_not_found_and_bad_date(client):
    assert client.get("/api/attendance/2026-03-02").status_code == 404
    assert client.get("/api/attendance/03-02-2026").status_code == 400


def test_attendance_range(client, stamps_repo, make_stamp):
    stamps_repo.add(
        make_stamp("2026-03-02", datetime(2026, 3, 2, 8, tzinfo=timezone.utc), datetime(2026, 3, 2, 18, tzinfo=timezone.utc))
    )

    res = client.get("/api/attendance?from=2026-03-01&to=2026-03-07")
    reversed_range = client.get("/api/attendance?from=2026-03-07&to=2026-03-01")
    missing = client.get("/api/attendance")

    body = res.get_json()
    assert res.status_code == 200
    assert len(body["records"]) == 1
    assert body["summary"]["workDays"] == 1
    assert body["summary"]["totalWorkMinutes"] == 600
    assert body["summary"]["totalStatutoryOvertimeMinutes"] == 0
    assert reversed_range.status_code == 400
    assert reversed_range.get_json()["error"] == "INVALID_DATE_RANGE"
    assert missing.status_code == 400


def test_storage_failure_maps_to_500(monkeypatch, broken_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    client = create_app(container=build_services(broken_repo, timezone="UTC")).test_client()

    res = client.get("/api/stamps/status")

    assert res.status_code == 500
    assert res.get_json()["error"] == "DATABASE_ERROR"
