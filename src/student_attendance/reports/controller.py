from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date_field, today_local
from ..common.guards import login_required, teacher_required
from ..common.responses import api_errors, csv_response
from ..core.enums import ActivityType
from ..core.exceptions import ValidationError
from ..container import Container
from .service import REPORT_CSV_FIELDS


def register(app: Flask, container: Container) -> None:
    def _range_from_query() -> tuple[date, date, str | None]:
        start_s = request.args.get("startDate")
        end_s = request.args.get("endDate")
        if not start_s or not end_s:
            raise ValidationError("Start date and end date are required")

        start = parse_iso_date_field(start_s, "startDate")
        end = parse_iso_date_field(end_s, "endDate")
        return start, end, request.args.get("className") or None

    @app.route("/api/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    @login_required
    @api_errors("Failed to retrieve dashboard statistics")
    def dashboard_stats():
        stats = container.report_service.dashboard_stats(today=today_local())
        return jsonify(stats.to_dict())

    @app.route("/api/reports/attendance", methods=["GET"], endpoint="attendance_report")
    @teacher_required
    @api_errors("Failed to generate attendance report")
    def attendance_report():
        start, end, class_name = _range_from_query()
        daily = container.report_service.attendance_stats(start=start, end=end, class_name=class_name)
        return jsonify([d.to_dict() for d in daily])

    @app.route("/api/reports/attendance/summary", methods=["GET"], endpoint="attendance_report_summary")
    @teacher_required
    @api_errors("Failed to generate attendance report")
    def attendance_report_summary():
        start, end, class_name = _range_from_query()
        daily = container.report_service.attendance_stats(start=start, end=end, class_name=class_name)
        summary = container.report_service.summarize(daily)
        summary.update({"startDate": start.isoformat(), "endDate": end.isoformat(), "className": class_name})
        return jsonify(summary)

    @app.route("/api/reports/attendance.csv", methods=["GET"], endpoint="attendance_report_csv")
    @teacher_required
    @api_errors("Failed to export attendance report")
    def attendance_report_csv():
        start, end, class_name = _range_from_query()
        daily = container.report_service.attendance_stats(start=start, end=end, class_name=class_name)

        filename = f"attendance_report_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        container.activity_service.log(
            ActivityType.REPORT,
            f"Attendance report for {start.isoformat()} to {end.isoformat()} was exported.",
        )
        return csv_response(container.report_service.csv_rows(daily), fieldnames=REPORT_CSV_FIELDS, filename=filename)
