from __future__ import annotations

import logging
from datetime import datetime

from flask import Flask, jsonify

from ..container import Container
from ..core.constants import ATTENDANCE_TABLE
from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _expose_details() -> bool:
        return bool(app.config.get("EXPOSE_ERROR_DETAILS", False))

    @app.route("/", endpoint="api_index")
    def api_index():
        return jsonify({
            "message": "Employee Attendance Tracker API",
            "version": app.config.get("API_VERSION", "1.0"),
            "status": "RUNNING",
            "endpoints": {
                "health": "GET /api/health",
                "init": "GET /api/init",
                "attendance": {
                    "list": "GET /api/attendance",
                    "create": "POST /api/attendance",
                    "delete": "DELETE /api/attendance/:id",
                    "search": "GET /api/attendance/search?query=name",
                    "stats": "GET /api/attendance/stats?query=&date=",
                },
                "dashboard": "GET /dashboard",
            },
        })

    @app.route("/api/health", endpoint="api_health")
    def api_health():
        """Storage round-trip only; never mutates data."""
        try:
            container.attendance_service.check_health()
        except StorageError as e:
            logger.error("Health check failed: %s", e.details or e)
            body = {"status": "ERROR", "server": "Running", "database": "Connection failed", "error": str(e)}
            if _expose_details() and e.details:
                body["details"] = e.details
            return jsonify(body), 503

        return jsonify({
            "status": "HEALTHY",
            "server": "Running",
            "database": "Connected and responsive",
            "timestamp": datetime.now().isoformat(),
        })

    @app.route("/api/init", methods=["GET", "POST"], endpoint="api_init")
    def api_init():
        try:
            container.attendance_service.ensure_schema()
        except StorageError as e:
            logger.error("Table creation failed: %s", e.details or e)
            body = {"success": False, "error": "Database setup failed"}
            if _expose_details() and e.details:
                body["details"] = e.details
            return jsonify(body), 500

        return jsonify({
            "success": True,
            "message": "Database ready! Table created successfully.",
            "table": ATTENDANCE_TABLE,
        })
