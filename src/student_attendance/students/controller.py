from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date_field
from ..common.guards import ensure_owner_or_teacher, login_required, teacher_required
from ..common.responses import api_errors, json_body, parse_id
from ..core.exceptions import ValidationError
from ..container import Container
from .model import fields_from_payload


def register(app: Flask, container: Container) -> None:
    def _parse_active(value):
        if value is None or value == "":
            return None
        lowered = value.strip().lower()
        if lowered in {"true", "1"}:
            return True
        if lowered in {"false", "0"}:
            return False
        raise ValidationError("active must be true or false")

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    @teacher_required
    @api_errors("Failed to retrieve students")
    def list_students():
        students = container.student_service.list_students(
            class_name=request.args.get("className") or None,
            active=_parse_active(request.args.get("active")),
        )
        return jsonify([s.to_dict() for s in students])

    @app.route("/api/students/<student_id>", methods=["GET"], endpoint="get_student")
    @login_required
    @api_errors("Failed to retrieve student")
    def get_student(student_id):
        sid = parse_id(student_id, "student")
        ensure_owner_or_teacher(container.user_service, sid)
        return jsonify(container.student_service.get_student(sid).to_dict())

    @app.route("/api/students", methods=["POST"], endpoint="create_student")
    @teacher_required
    @api_errors("Failed to create student")
    def create_student():
        student = container.student_service.create_student(fields_from_payload(json_body()))
        return jsonify(student.to_dict()), 201

    @app.route("/api/students/<student_id>", methods=["PUT"], endpoint="update_student")
    @teacher_required
    @api_errors("Failed to update student")
    def update_student(student_id):
        sid = parse_id(student_id, "student")
        student = container.student_service.update_student(sid, fields_from_payload(json_body()))
        return jsonify(student.to_dict())

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    @teacher_required
    @api_errors("Failed to delete student")
    def delete_student(student_id):
        container.student_service.delete_student(parse_id(student_id, "student"))
        return "", 204

    @app.route("/api/students/<student_id>/attendance/summary", methods=["GET"], endpoint="student_attendance_summary")
    @login_required
    @api_errors("Failed to summarize attendance")
    def student_attendance_summary(student_id):
        sid = parse_id(student_id, "student")
        ensure_owner_or_teacher(container.user_service, sid)

        start_s = request.args.get("startDate")
        end_s = request.args.get("endDate")
        start = parse_iso_date_field(start_s, "startDate") if start_s else None
        end = parse_iso_date_field(end_s, "endDate") if end_s else None
        return jsonify(container.report_service.student_summary(sid, start=start, end=end))
