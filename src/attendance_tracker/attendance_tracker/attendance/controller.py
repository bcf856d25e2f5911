from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_optional_date
from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    """JSON API for attendance records.

    Domain errors propagate to the handlers in `system.errors`, which map
    ValidationError -> 400, NotFoundError -> 404 and StorageError -> 500.
    """

    def _read_payload() -> dict:
        if request.is_json:
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                raise ValidationError("Request body must be a JSON object")
            return data
        return request.form.to_dict()

    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance_list")
    def api_attendance_list():
        records = container.attendance_service.list_records()
        logger.debug("Found %d records", len(records))
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance_create")
    def api_attendance_create():
        record = container.attendance_service.create(_read_payload())
        return jsonify({
            "success": True,
            "message": f"Attendance recorded for {record.employee_name}",
            "id": record.id,
            "record": record.to_dict(),
        }), 200

    @app.route("/api/attendance/<int:record_id>", methods=["DELETE"], endpoint="api_attendance_delete")
    def api_attendance_delete(record_id: int):
        container.attendance_service.delete(record_id)
        return jsonify({"message": "Record deleted successfully", "id": record_id}), 200

    @app.route("/api/attendance/search", methods=["GET"], endpoint="api_attendance_search")
    def api_attendance_search():
        records = container.attendance_service.search(request.args.get("query"))
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance/stats", methods=["GET"], endpoint="api_attendance_stats")
    def api_attendance_stats():
        work_date = parse_optional_date(request.args.get("date"))
        summary = container.report_service.summary(query=request.args.get("query"), work_date=work_date)
        return jsonify(summary.to_dict())
