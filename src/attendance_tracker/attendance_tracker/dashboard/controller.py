from __future__ import annotations

import logging
from datetime import datetime

from flask import Flask, flash, redirect, render_template, request, url_for

from ..attendance.validation import REQUIRED_FIELDS
from ..common.datetime_utils import parse_optional_date, today_local
from ..container import Container
from ..core.constants import DEFAULT_RECENT_LIMIT
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, SchemaNotInitializedError, StorageError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _storage_problem(e: StorageError) -> dict:
        """Template context for a failed storage call."""
        if isinstance(e, SchemaNotInitializedError):
            return {"schema_missing": True}
        if bool(app.config.get("EXPOSE_ERROR_DETAILS", False)) and e.details:
            flash(f"{e}: {e.details}", "danger")
        else:
            flash(str(e), "danger")
        return {"storage_failed": True}

    @app.route("/dashboard", endpoint="dashboard")
    def dashboard():
        try:
            view = container.report_service.build_dashboard()
        except StorageError as e:
            return render_template(
                "dashboard.html",
                view=None,
                recent=[],
                last_updated=datetime.now().strftime("%H:%M:%S"),
                active_page="dashboard",
                **_storage_problem(e),
            )

        return render_template(
            "dashboard.html",
            view=view,
            summary=view.overall,
            recent=view.rows[:DEFAULT_RECENT_LIMIT],
            last_updated=datetime.now().strftime("%H:%M:%S"),
            active_page="dashboard",
        )

    @app.route("/records", endpoint="records")
    def records():
        query = request.args.get("query", "")
        date_s = request.args.get("date", "")
        try:
            work_date = parse_optional_date(date_s)
        except ValidationError as e:
            flash(str(e), "warning")
            work_date = None

        try:
            view = container.report_service.build_dashboard(query=query, work_date=work_date)
        except StorageError as e:
            return render_template("records.html", view=None, query=query, date=date_s, active_page="records", **_storage_problem(e))

        return render_template(
            "records.html",
            view=view,
            query=query,
            date=work_date.strftime("%Y-%m-%d") if work_date else "",
            active_page="records",
        )

    @app.route("/records/new", methods=["GET", "POST"], endpoint="record_new")
    def record_new():
        form = {
            "employeeName": "",
            "employeeID": "",
            "date": today_local().strftime("%Y-%m-%d"),
            "status": AttendanceStatus.PRESENT.value,
        }
        ctx: dict = {}

        if request.method == "POST":
            form = {field: request.form.get(field, "") for field in REQUIRED_FIELDS}
            try:
                record = container.attendance_service.create(form)
                flash(f"Attendance recorded for {record.employee_name}", "success")
                return redirect(url_for("record_new"))
            except ValidationError as e:
                flash(str(e), "warning")
                ctx["invalid_fields"] = list(e.fields)
            except StorageError as e:
                ctx.update(_storage_problem(e))

        return render_template(
            "record_form.html",
            form=form,
            statuses=AttendanceStatus.values(),
            active_page="record_new",
            **ctx,
        )

    @app.route("/records/<int:record_id>/delete", methods=["POST"], endpoint="record_delete")
    def record_delete(record_id: int):
        try:
            container.attendance_service.delete(record_id)
            flash("Record deleted successfully", "success")
        except NotFoundError as e:
            flash(str(e), "warning")
        except StorageError as e:
            logger.error("Delete failed for id=%s: %s", record_id, e.details or e)
            flash("Failed to delete record", "danger")
        return redirect(url_for("records", query=request.form.get("query", ""), date=request.form.get("date", "")))
