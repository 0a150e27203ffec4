from __future__ import annotations

from flask import Flask, jsonify, redirect, request, url_for

from ..common.datetime_utils import parse_iso_date_field
from ..common.guards import current_user_id, is_teacher, login_required, teacher_required
from ..common.responses import api_errors, csv_response, json_body, parse_id
from ..core.exceptions import NotFoundError
from ..container import Container
from .service import CSV_FIELDS

# JSON field name -> AttendanceService.update_attendance key
UPDATE_FIELDS = {
    "studentId": "student_id",
    "date": "work_date",
    "status": "status",
    "time": "time",
    "notes": "notes",
}


def register(app: Flask, container: Container) -> None:
    def _filters_from_query() -> dict:
        filters: dict = {}

        date_s = request.args.get("date")
        if date_s:
            filters["work_date"] = parse_iso_date_field(date_s, "date")

        # A non-numeric studentId filter is ignored rather than rejected.
        student_s = request.args.get("studentId")
        if student_s and student_s.isdigit():
            filters["student_id"] = int(student_s)

        class_name = request.args.get("className")
        if class_name:
            filters["class_name"] = class_name

        if not is_teacher():
            # students are pinned to their own record whatever they asked for
            filters.pop("class_name", None)
            filters["student_id"] = _own_student_id()
        return filters

    def _own_student_id() -> int:
        student_id = container.user_service.get_linked_student_id(current_user_id())
        if student_id is None:
            raise NotFoundError("Student record not found")
        return student_id

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @login_required
    @api_errors("Failed to retrieve attendance records")
    def list_attendance():
        return jsonify(container.attendance_service.list_records(**_filters_from_query()))

    @app.route("/api/attendance", methods=["POST"], endpoint="create_attendance")
    @teacher_required
    @api_errors("Failed to create attendance record")
    def create_attendance():
        data = json_body()
        record = container.attendance_service.mark_attendance(
            student_id=data.get("studentId"),
            work_date=data.get("date"),
            status=data.get("status"),
            time=data.get("time"),
            notes=data.get("notes"),
        )
        return jsonify(record.to_dict()), 201

    @app.route("/api/attendance/<record_id>", methods=["PUT"], endpoint="update_attendance")
    @teacher_required
    @api_errors("Failed to update attendance record")
    def update_attendance(record_id):
        rid = parse_id(record_id, "attendance")
        data = json_body()
        changes = {attr: data[key] for key, attr in UPDATE_FIELDS.items() if key in data}
        record = container.attendance_service.update_attendance(rid, changes)
        return jsonify(record.to_dict())

    @app.route("/api/attendance.csv", methods=["GET"], endpoint="attendance_csv")
    @teacher_required
    @api_errors("Failed to export attendance records")
    def attendance_csv():
        filters = _filters_from_query()
        rows = container.attendance_service.export_rows(**filters)

        day = filters.get("work_date")
        filename = f"attendance_{day.isoformat()}.csv" if day else "attendance.csv"
        return csv_response(rows, fieldnames=CSV_FIELDS, filename=filename)

    @app.route("/api/my-attendance", methods=["GET"], endpoint="my_attendance")
    @login_required
    @api_errors("Failed to retrieve attendance")
    def my_attendance():
        if is_teacher():
            return redirect(url_for("list_attendance"))

        records = container.attendance_service.records_for_student(_own_student_id())
        return jsonify([r.to_dict() for r in records])
