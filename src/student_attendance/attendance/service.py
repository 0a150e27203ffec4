from __future__ import annotations

from datetime import date
from contextlib import nullcontext
from typing import Any, Callable, ContextManager, Optional, Sequence

from ..activities.service import ActivityService
from ..common.datetime_utils import parse_iso_date_field
from ..common.validators import optional_text, parse_positive_int, parse_status
from ..core.enums import ActivityType
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

CSV_FIELDS = ["Student ID", "Name", "Class", "Date", "Status", "Time", "Notes"]


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        activities: ActivityService,
        transaction: Callable[[], ContextManager] = nullcontext,
    ):
        self._attendance = attendance
        self._students = students
        self._activities = activities
        self._transaction = transaction

    def list_records(
        self,
        *,
        work_date: Optional[date] = None,
        student_id: Optional[int] = None,
        class_name: Optional[str] = None,
    ) -> list[dict]:
        """Records joined with their student, newest day first.

        Records whose student no longer exists are skipped.
        """
        students = {s.id: s for s in self._students.list_all()}
        if class_name:
            students = {sid: s for sid, s in students.items() if s.class_name == class_name}
        if student_id is not None:
            students = {sid: s for sid, s in students.items() if sid == student_id}

        records = self._attendance.find(work_date=work_date, student_ids=students.keys())
        records = sorted(records, key=lambda r: (-r.work_date.toordinal(), r.id))
        return [self._with_student(r, students[r.student_id]) for r in records]

    def records_for_student(self, student_id: int) -> list[AttendanceRecord]:
        """A student's records, newest day first."""
        records = self._attendance.find(student_ids=[student_id])
        return sorted(records, key=lambda r: (-r.work_date.toordinal(), r.id))

    def records_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        return self._attendance.find(work_date=work_date)

    def records_for_class(self, class_name: str, work_date: Optional[date] = None) -> list[dict]:
        return self.list_records(work_date=work_date, class_name=class_name)

    def get_record(self, record_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(record_id)
        if not record:
            raise NotFoundError("Attendance record not found")
        return record

    def mark_attendance(
        self,
        *,
        student_id: Any,
        work_date: Any,
        status: Any,
        time: Any = None,
        notes: Any = None,
    ) -> AttendanceRecord:
        sid = parse_positive_int(student_id, "student ID")
        day = parse_iso_date_field(work_date, "Date")
        status = parse_status(status)

        with self._transaction():
            student = self._students.get_by_id(sid)
            if not student:
                raise ValidationError("Student not found")
            if self._attendance.get_for_student_and_date(sid, day):
                raise ConflictError(f"Attendance for {student.full_name} on {day.isoformat()} already exists")

            record = self._attendance.create(
                student_id=sid,
                work_date=day,
                status=status,
                time=optional_text(time),
                notes=optional_text(notes),
            )
        self._activities.log(ActivityType.ATTENDANCE, f"{student.full_name} was marked {record.status.value}.")
        return record

    def update_attendance(self, record_id: int, changes: dict) -> AttendanceRecord:
        existing = self.get_record(record_id)

        data: dict = {}
        if "student_id" in changes:
            data["student_id"] = parse_positive_int(changes["student_id"], "student ID")
        if "work_date" in changes:
            data["work_date"] = parse_iso_date_field(changes["work_date"], "Date")
        if "status" in changes:
            data["status"] = parse_status(changes["status"])
        for attr in ("time", "notes"):
            if attr in changes:
                data[attr] = optional_text(changes[attr])

        student_id = data.get("student_id", existing.student_id)
        work_date = data.get("work_date", existing.work_date)

        with self._transaction():
            student = self._students.get_by_id(student_id)
            if not student:
                raise ValidationError("Student not found")
            clash = self._attendance.get_for_student_and_date(student_id, work_date)
            if clash and clash.id != existing.id:
                raise ConflictError(f"Attendance for {student.full_name} on {work_date.isoformat()} already exists")

            updated = self._attendance.update(existing.id, data)
            if not updated:
                raise NotFoundError("Attendance record not found")
        self._activities.log(
            ActivityType.ATTENDANCE,
            f"Attendance for {student.full_name} was updated to {updated.status.value}.",
        )
        return updated

    def export_rows(self, **filters: Any) -> list[dict]:
        """Flat rows for CSV export, same filters as list_records."""
        out = []
        for row in self.list_records(**filters):
            student = row["student"]
            out.append(
                {
                    "Student ID": student["studentId"],
                    "Name": f"{student['firstName']} {student['lastName']}",
                    "Class": student["className"],
                    "Date": row["date"],
                    "Status": row["status"],
                    "Time": row["time"] or "",
                    "Notes": row["notes"] or "",
                }
            )
        return out

    @staticmethod
    def _with_student(record: AttendanceRecord, student: Student) -> dict:
        row = record.to_dict()
        row["student"] = student.to_dict()
        return row
