from __future__ import annotations

from src.attendance_tracker.attendance_tracker.core.exceptions import StorageError

ASHA = {"employeeName": "Asha", "employeeID": "E1", "date": "2025-01-10", "status": "Present"}


def test_list_is_empty_array_when_no_records(client):
    resp = client.get("/api/attendance")

    assert resp.status_code == 200
    assert resp.get_json() == []


def test_create_returns_id_and_record(client):
    resp = client.post("/api/attendance", json=ASHA)

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["success"] is True
    assert body["message"] == "Attendance recorded for Asha"
    assert body["id"] == 1
    assert body["record"]["employeeID"] == "E1"

    listed = client.get("/api/attendance").get_json()
    assert len(listed) == 1
    assert listed[0]["id"] == body["id"]
    assert listed[0]["date"] == "2025-01-10"
    assert listed[0]["status"] == "Present"
    assert "createdAt" in listed[0]


def test_create_accepts_form_body(client):
    resp = client.post("/api/attendance", data=ASHA)

    assert resp.status_code == 200


def test_create_missing_status_is_400_and_persists_nothing(client):
    payload = dict(ASHA)
    del payload["status"]

    resp = client.post("/api/attendance", json=payload)

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "All fields are required", "fields": ["status"]}
    assert client.get("/api/attendance").get_json() == []


def test_create_invalid_status_is_400(client):
    resp = client.post("/api/attendance", json={**ASHA, "status": "Late"})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Status must be Present or Absent"


def test_create_with_non_object_json_is_400(client):
    resp = client.post("/api/attendance", json=["Asha"])

    assert resp.status_code == 400


def test_delete_then_retry_is_404(client):
    rid = client.post("/api/attendance", json=ASHA).get_json()["id"]

    first = client.delete(f"/api/attendance/{rid}")
    second = client.delete(f"/api/attendance/{rid}")

    assert first.status_code == 200
    assert first.get_json()["message"] == "Record deleted successfully"
    assert second.status_code == 404
    assert second.get_json() == {"error": "Record not found"}


def test_search_requires_query(client):
    assert client.get("/api/attendance/search").status_code == 400
    resp = client.get("/api/attendance/search?query=")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Search query required"


def test_search_returns_matches(client):
    client.post("/api/attendance", json=ASHA)
    client.post("/api/attendance", json={**ASHA, "employeeName": "Bilal", "employeeID": "E2"})

    resp = client.get("/api/attendance/search?query=bil")

    assert resp.status_code == 200
    assert [r["employeeName"] for r in resp.get_json()] == ["Bilal"]


def test_stats_over_filtered_records(client):
    client.post("/api/attendance", json=ASHA)
    client.post("/api/attendance", json={**ASHA, "date": "2025-01-11", "status": "Absent"})

    assert client.get("/api/attendance/stats").get_json() == {
        "total": 2,
        "presentCount": 1,
        "absentCount": 1,
        "attendanceRate": 50.0,
        "uniqueEmployeeCount": 1,
    }
    assert client.get("/api/attendance/stats?date=2025-01-11").get_json()["attendanceRate"] == 0
    assert client.get("/api/attendance/stats?date=yesterday").status_code == 400
    assert client.get("/api/attendance/stats?date=2025-1-11").status_code == 400


def test_storage_failure_is_500_not_404(client, repo):
    repo.fail_with = StorageError("Failed to delete record", details="Lost connection to MySQL server")

    resp = client.delete("/api/attendance/1")

    assert resp.status_code == 500
    assert resp.get_json() == {
        "error": "Failed to delete record",
        "details": "Lost connection to MySQL server",
    }


def test_storage_details_hidden_when_not_exposed(app, client, repo):
    app.config["EXPOSE_ERROR_DETAILS"] = False
    repo.fail_with = StorageError("Cannot read from database", details="secret driver message")

    resp = client.get("/api/attendance")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Cannot read from database"}


def test_missing_table_is_flagged(client, repo):
    repo.schema_ready = False

    resp = client.get("/api/attendance")

    assert resp.status_code == 500
    assert resp.get_json()["code"] == "SCHEMA_NOT_INITIALIZED"
