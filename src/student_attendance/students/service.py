from __future__ import annotations

import logging
import re
from contextlib import nullcontext
from typing import Callable, ContextManager, Optional, Sequence

from ..activities.service import ActivityService
from ..attendance.repository import AttendanceRepository
from ..classes.repository import ClassRepository
from ..common.validators import optional_text, require_min_length, require_non_empty
from ..core.constants import MIN_NAME_LENGTH, MIN_STUDENT_CODE_LENGTH
from ..core.enums import ActivityType
from ..core.exceptions import NotFoundError, ValidationError
from .model import PAYLOAD_FIELDS, Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_OPTIONAL_FIELDS = ("email", "phone_number", "parent_name", "parent_phone", "address")


class StudentService:
    """Use case: manage the student roster."""

    def __init__(
        self,
        students: StudentRepository,
        classes: ClassRepository,
        attendance: AttendanceRepository,
        activities: ActivityService,
        transaction: Callable[[], ContextManager] = nullcontext,
    ):
        self._students = students
        self._classes = classes
        self._attendance = attendance
        self._activities = activities
        self._transaction = transaction

    def list_students(self, *, class_name: Optional[str] = None, active: Optional[bool] = None) -> Sequence[Student]:
        students = self._students.list_by_class(class_name) if class_name else self._students.list_all()
        if active is not None:
            students = [s for s in students if s.active == active]
        return students

    def get_student(self, student_id: int) -> Student:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student not found")
        return student

    def create_student(self, fields: dict) -> Student:
        with self._transaction():
            data = self._clean(fields)
            if self._students.get_by_code(data["student_code"]):
                raise ValidationError("Student ID already exists")
            student = self._students.create(**data)

        self._activities.log(
            ActivityType.STUDENT,
            f"New student {student.full_name} was added to {student.class_name}.",
        )
        return student

    def update_student(self, student_id: int, changes: dict) -> Student:
        existing = self.get_student(student_id)

        merged = {attr: getattr(existing, attr) for attr in PAYLOAD_FIELDS.values()}
        merged.update({k: v for k, v in changes.items() if k in merged})
        with self._transaction():
            data = self._clean(merged)
            if data["student_code"] != existing.student_code:
                other = self._students.get_by_code(data["student_code"])
                if other and other.id != existing.id:
                    raise ValidationError("Student ID already exists")

            updated = self._students.update(existing.id, data)
            if not updated:
                raise NotFoundError("Student not found")
        self._activities.log(ActivityType.STUDENT, f"Student {updated.full_name} details were updated.")
        return updated

    def delete_student(self, student_id: int) -> None:
        student = self.get_student(student_id)

        # cascade and removal share one transaction
        with self._transaction():
            removed = self._attendance.delete_for_student(student.id)
            if not self._students.delete_by_id(student.id):
                raise NotFoundError("Student not found")

        logger.info("deleted student id=%s with %s attendance records", student.id, removed)
        self._activities.log(ActivityType.STUDENT, f"Student {student.full_name} was removed.")

    def _clean(self, fields: dict) -> dict:
        student_code = require_non_empty(fields.get("student_code"), "Student ID")
        require_min_length(student_code, "Student ID", MIN_STUDENT_CODE_LENGTH)
        first_name = require_non_empty(fields.get("first_name"), "First name")
        require_min_length(first_name, "First name", MIN_NAME_LENGTH)
        last_name = require_non_empty(fields.get("last_name"), "Last name")
        require_min_length(last_name, "Last name", MIN_NAME_LENGTH)
        class_name = require_non_empty(fields.get("class_name"), "Class")

        if not self._classes.get_by_name(class_name):
            raise ValidationError(f"Class {class_name} does not exist")

        data = {
            "student_code": student_code,
            "first_name": first_name,
            "last_name": last_name,
            "class_name": class_name,
            "active": self._as_bool(fields.get("active", True)),
        }
        for attr in _OPTIONAL_FIELDS:
            data[attr] = optional_text(fields.get(attr))

        if data["email"] and not _EMAIL.match(data["email"]):
            raise ValidationError("Please enter a valid email address")
        return data

    @staticmethod
    def _as_bool(value) -> bool:
        if value is None:
            return True
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in {"true", "1", "yes"}:
                return True
            if lowered in {"false", "0", "no"}:
                return False
        raise ValidationError("Active must be true or false")
