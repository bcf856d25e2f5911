from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class NewAttendanceRecord:
    """Validated input, ready to be stored (no id or timestamp yet)."""

    employee_name: str
    employee_id: str
    work_date: date
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one (employee, date, status) observation."""

    id: int
    employee_name: str
    employee_id: str
    work_date: date
    status: AttendanceStatus
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeName": self.employee_name,
            "employeeID": self.employee_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
        }
