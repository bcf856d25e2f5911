from __future__ import annotations

import logging
from typing import Sequence

from ..core.constants import ATTENDANCE_TABLE
from ..core.enums import AttendanceStatus
from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, escape_like, fetchall, fetchone
from .model import AttendanceRecord, NewAttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

CREATE_TABLE_SQL = f"""
CREATE TABLE IF NOT EXISTS {ATTENDANCE_TABLE} (
    id INT AUTO_INCREMENT PRIMARY KEY,
    employeeName VARCHAR(255) NOT NULL,
    employeeID VARCHAR(100) NOT NULL,
    date DATE NOT NULL,
    status ENUM('Present', 'Absent') NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    INDEX idx_attendance_date_created (date, created_at)
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci
"""

_COLUMNS = "id, employeeName, employeeID, date, status, created_at"
_ORDER_BY = "ORDER BY date DESC, created_at DESC, id DESC"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        id=int(r["id"]),
        employee_name=r["employeeName"],
        employee_id=r["employeeID"],
        work_date=r["date"],
        status=AttendanceStatus(r["status"]),
        created_at=r["created_at"],
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def ensure_schema(self) -> None:
        with db_cursor(self._conn_factory, action="initialize database") as (_, cur):
            cur.execute(CREATE_TABLE_SQL)

    def create(self, record: NewAttendanceRecord) -> AttendanceRecord:
        with db_cursor(self._conn_factory, action="save record") as (_, cur):
            cur.execute(
                f"""
                INSERT INTO {ATTENDANCE_TABLE}(employeeName, employeeID, date, status)
                VALUES(%s,%s,%s,%s)
                """,
                (record.employee_name, record.employee_id, record.work_date, record.status.value),
            )
            new_id = int(cur.lastrowid)

            # Read back on the same connection to get the stored created_at.
            cur.execute(f"SELECT {_COLUMNS} FROM {ATTENDANCE_TABLE} WHERE id=%s", (new_id,))
            row = fetchone(cur)
            if not row:
                raise StorageError("Failed to save record", details=f"row {new_id} missing after insert")
            return _to_record(row)

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory, action="read records") as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM {ATTENDANCE_TABLE} {_ORDER_BY}")
            return [_to_record(r) for r in fetchall(cur)]

    def delete_by_id(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory, action="delete record") as (_, cur):
            cur.execute(f"DELETE FROM {ATTENDANCE_TABLE} WHERE id=%s", (int(record_id),))
            return cur.rowcount > 0

    def search(self, query: str) -> Sequence[AttendanceRecord]:
        term = f"%{escape_like(query.lower())}%"
        with db_cursor(self._conn_factory, action="search records") as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM {ATTENDANCE_TABLE}
                WHERE LOWER(employeeName) LIKE %s OR LOWER(employeeID) LIKE %s
                {_ORDER_BY}
                """,
                (term, term),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def ping(self) -> None:
        with db_cursor(self._conn_factory, action="reach database") as (_, cur):
            cur.execute("SELECT 1 + 1 AS result")
            fetchone(cur)
