from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.validators import clean_text
from .model import AttendanceRecord


def matches_query(record: AttendanceRecord, query: str) -> bool:
    """Case-insensitive substring match on employee name or employee ID."""
    needle = query.lower()
    return needle in record.employee_name.lower() or needle in record.employee_id.lower()


def filter_records(
    records: Iterable[AttendanceRecord],
    *,
    query: Optional[str] = None,
    work_date: Optional[date] = None,
) -> list[AttendanceRecord]:
    """Compose the live search string and the exact-date filter with AND.

    Blank criteria are ignored; the input order is preserved.
    """

    needle = clean_text(query)
    return [
        r
        for r in records
        if (needle is None or matches_query(r, needle)) and (work_date is None or r.work_date == work_date)
    ]
