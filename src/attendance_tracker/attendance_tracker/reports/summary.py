from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceSummary:
    total: int
    present_count: int
    absent_count: int
    attendance_rate: float
    unique_employee_count: int

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "presentCount": self.present_count,
            "absentCount": self.absent_count,
            "attendanceRate": self.attendance_rate,
            "uniqueEmployeeCount": self.unique_employee_count,
        }


def attendance_rate(present: int, total: int) -> float:
    """Percentage of present entries, one decimal place; 0 for an empty set."""
    if total == 0:
        return 0.0
    return round(present / total * 100, 1)


def summarize(records: Iterable[AttendanceRecord]) -> AttendanceSummary:
    total = present = absent = 0
    names: set[str] = set()

    for r in records:
        total += 1
        if r.status == AttendanceStatus.PRESENT:
            present += 1
        elif r.status == AttendanceStatus.ABSENT:
            absent += 1
        names.add(r.employee_name)

    return AttendanceSummary(
        total=total,
        present_count=present,
        absent_count=absent,
        attendance_rate=attendance_rate(present, total),
        unique_employee_count=len(names),
    )
