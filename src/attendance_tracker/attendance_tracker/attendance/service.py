from __future__ import annotations

import logging
import threading
from typing import Any, Mapping, Optional

from ..common.validators import clean_text
from ..core.exceptions import NotFoundError, ValidationError
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .validation import normalize_attendance_input

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance
        self._schema_lock = threading.Lock()
        self._schema_ready = False

    @property
    def schema_ready(self) -> bool:
        return self._schema_ready

    def ensure_schema(self) -> None:
        """Create the storage structure if absent; safe to call repeatedly."""
        with self._schema_lock:
            self._attendance.ensure_schema()
            self._schema_ready = True
        logger.info("Attendance table is ready")

    def create(self, raw: Mapping[str, Any]) -> AttendanceRecord:
        record = normalize_attendance_input(raw)
        saved = self._attendance.create(record)
        logger.info(
            "Recorded %s for %s (%s) on %s, id=%s",
            saved.status.value,
            saved.employee_name,
            saved.employee_id,
            saved.work_date,
            saved.id,
        )
        return saved

    def list_records(self) -> list[AttendanceRecord]:
        return list(self._attendance.list_all())

    def delete(self, record_id: int) -> bool:
        if not self._attendance.delete_by_id(int(record_id)):
            raise NotFoundError("Record not found")
        logger.info("Deleted attendance record id=%s", record_id)
        return True

    def search(self, query: Optional[str]) -> list[AttendanceRecord]:
        needle = clean_text(query)
        if needle is None:
            raise ValidationError("Search query required", fields=["query"])
        return list(self._attendance.search(needle))

    def check_health(self) -> None:
        """One trivial round-trip to storage; raises StorageError when unreachable."""
        self._attendance.ping()
