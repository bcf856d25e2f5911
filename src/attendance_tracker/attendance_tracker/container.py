from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DatabaseConnection, DBConfig
from .reports.service import AttendanceReportService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: AttendanceRepository

    attendance_service: AttendanceService
    report_service: AttendanceReportService


def build_services(attendance_repo: AttendanceRepository, *, conn: Optional[DatabaseConnection] = None) -> Container:
    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        attendance_service=AttendanceService(attendance_repo),
        report_service=AttendanceReportService(attendance_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return build_services(MySQLAttendanceRepository(conn), conn=conn)
