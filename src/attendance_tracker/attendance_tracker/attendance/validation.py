"""Validation and normalization of user-supplied attendance input.

Every field is checked before anything touches storage. All offending fields
are reported together so a form can highlight them at once.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import clean_text
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import NewAttendanceRecord

REQUIRED_FIELDS = ("employeeName", "employeeID", "date", "status")


def parse_status(value: Any) -> Optional[AttendanceStatus]:
    """Case-sensitive: only the exact values "Present" and "Absent" are accepted."""
    if not isinstance(value, str):
        return None
    try:
        return AttendanceStatus(value)
    except ValueError:
        return None


def normalize_attendance_input(raw: Mapping[str, Any]) -> NewAttendanceRecord:
    if not isinstance(raw, Mapping):
        raise ValidationError("Request body must be an object", fields=REQUIRED_FIELDS)

    name = clean_text(raw.get("employeeName"))
    employee_id = clean_text(raw.get("employeeID"))
    date_text = clean_text(raw.get("date"))
    status_raw = raw.get("status")

    missing = [
        field
        for field, value in (
            ("employeeName", name),
            ("employeeID", employee_id),
            ("date", date_text),
            ("status", clean_text(status_raw)),
        )
        if value is None
    ]
    if missing:
        raise ValidationError("All fields are required", fields=missing)

    invalid: list[str] = []
    work_date: Optional[date] = None
    try:
        work_date = parse_iso_date(date_text)
    except ValueError:
        invalid.append("date")

    status = parse_status(status_raw)
    if status is None:
        invalid.append("status")

    if invalid == ["status"]:
        raise ValidationError("Status must be Present or Absent", fields=invalid)
    if invalid == ["date"]:
        raise ValidationError("Date must be in YYYY-MM-DD format", fields=invalid)
    if invalid:
        raise ValidationError(
            "Date must be in YYYY-MM-DD format and status must be Present or Absent", fields=invalid
        )

    return NewAttendanceRecord(
        employee_name=name,
        employee_id=employee_id,
        work_date=work_date,
        status=status,
    )
