from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance status stored in the database."""

    PRESENT = "Present"
    ABSENT = "Absent"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(s.value for s in cls)
