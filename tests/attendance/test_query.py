from __future__ import annotations

from datetime import date, datetime

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceRecord
from src.attendance_tracker.attendance_tracker.attendance.query import filter_records, matches_query
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus


def _rec(rid, name, emp_id, day, status=AttendanceStatus.PRESENT):
    return AttendanceRecord(
        id=rid,
        employee_name=name,
        employee_id=emp_id,
        work_date=day,
        status=status,
        created_at=datetime(2025, 1, 1, 8, 0, rid),
    )


ROWS = [
    _rec(3, "Asha Rao", "E1", date(2025, 1, 11)),
    _rec(2, "Bilal Khan", "E2", date(2025, 1, 11), AttendanceStatus.ABSENT),
    _rec(1, "Asha Rao", "E1", date(2025, 1, 10)),
]


def test_matches_query_on_name_or_id_case_insensitive():
    assert matches_query(ROWS[0], "asha")
    assert matches_query(ROWS[1], "e2")
    assert not matches_query(ROWS[1], "asha")


def test_blank_criteria_return_everything_in_order():
    assert filter_records(ROWS, query="  ", work_date=None) == ROWS


def test_query_and_date_compose_with_and():
    result = filter_records(ROWS, query="asha", work_date=date(2025, 1, 11))

    assert [r.id for r in result] == [3]


def test_date_only_filter():
    result = filter_records(ROWS, work_date=date(2025, 1, 11))

    assert [r.id for r in result] == [3, 2]
