from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord, NewAttendanceRecord


class AttendanceRepository(Protocol):
    """Persistent store of attendance records.

    Listing and search results are ordered by date DESC, created_at DESC
    (id DESC as the final tie-break).
    """

    def ensure_schema(self) -> None:
        raise NotImplementedError

    def create(self, record: NewAttendanceRecord) -> AttendanceRecord:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def delete_by_id(self, record_id: int) -> bool:
        raise NotImplementedError

    def search(self, query: str) -> Sequence[AttendanceRecord]:
        """Case-insensitive substring match on employee name or employee ID."""

        raise NotImplementedError

    def ping(self) -> None:
        raise NotImplementedError
