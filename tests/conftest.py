from __future__ import annotations

import threading
from datetime import datetime, timedelta
from typing import Optional

import pytest

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceRecord, NewAttendanceRecord
from src.attendance_tracker.attendance_tracker.attendance.query import matches_query
from src.attendance_tracker.attendance_tracker.container import build_services
from src.attendance_tracker.attendance_tracker.core.exceptions import SchemaNotInitializedError, StorageError
from src.attendance_tracker.attendance_tracker.main import create_app


class InMemoryAttendance:
    """Thread-safe stand-in for the MySQL repository."""

    def __init__(self, *, start: datetime = datetime(2025, 1, 10, 9, 0, 0), schema_ready: bool = True):
        self._rows: dict[int, AttendanceRecord] = {}
        self._id = 0
        self._now = start
        self._lock = threading.Lock()
        self.schema_ready = schema_ready
        self.schema_calls = 0
        self.create_calls = 0
        self.fail_with: Optional[StorageError] = None

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        if not self.schema_ready:
            raise SchemaNotInitializedError("Database not initialized", details="Table 'attendance' doesn't exist")

    def _sorted(self, rows):
        return sorted(rows, key=lambda r: (r.work_date, r.created_at, r.id), reverse=True)

    def ensure_schema(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        with self._lock:
            self.schema_calls += 1
            self.schema_ready = True

    def create(self, record: NewAttendanceRecord) -> AttendanceRecord:
        self._check()
        with self._lock:
            self.create_calls += 1
            self._id += 1
            self._now += timedelta(seconds=1)
            rec = AttendanceRecord(
                id=self._id,
                employee_name=record.employee_name,
                employee_id=record.employee_id,
                work_date=record.work_date,
                status=record.status,
                created_at=self._now,
            )
            self._rows[rec.id] = rec
            return rec

    def list_all(self):
        self._check()
        with self._lock:
            return self._sorted(self._rows.values())

    def delete_by_id(self, record_id: int) -> bool:
        self._check()
        with self._lock:
            return self._rows.pop(int(record_id), None) is not None

    def search(self, query: str):
        self._check()
        with self._lock:
            return self._sorted(r for r in self._rows.values() if matches_query(r, query))

    def ping(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with


@pytest.fixture
def repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def container(repo):
    return build_services(repo)


@pytest.fixture
def app(container):
    app = create_app(settings_module="config.testing", container=container)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
