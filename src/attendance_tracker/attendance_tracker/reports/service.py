from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..attendance.query import filter_records
from ..attendance.repository import AttendanceRepository
from .summary import AttendanceSummary, summarize


@dataclass(frozen=True)
class DashboardView:
    """Read model for the records page (filtered rows plus their statistics)."""

    rows: list[AttendanceRecord]
    summary: AttendanceSummary
    overall: AttendanceSummary
    query: str
    work_date: Optional[date]

    @property
    def total_records(self) -> int:
        return self.overall.total

    @property
    def is_filtered(self) -> bool:
        return bool(self.query) or self.work_date is not None


class AttendanceReportService:
    """Statistics over attendance records, recomputed on every call."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def summary(self, *, query: Optional[str] = None, work_date: Optional[date] = None) -> AttendanceSummary:
        records = self._attendance.list_all()
        return summarize(filter_records(records, query=query, work_date=work_date))

    def build_dashboard(self, *, query: Optional[str] = None, work_date: Optional[date] = None) -> DashboardView:
        records = list(self._attendance.list_all())
        rows = filter_records(records, query=query, work_date=work_date)
        return DashboardView(
            rows=rows,
            summary=summarize(rows),
            overall=summarize(records),
            query=(query or "").strip(),
            work_date=work_date,
        )
