from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access control."""

    TEACHER = "teacher"
    STUDENT = "student"


class AttendanceStatus(str, Enum):
    """Normalized attendance status stored per student per day."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EXCUSED = "excused"


class ActivityType(str, Enum):
    """Category of an entry in the activity feed."""

    USER = "user"
    STUDENT = "student"
    CLASS = "class"
    ATTENDANCE = "attendance"
    REPORT = "report"
