from __future__ import annotations

from dataclasses import dataclass

from .activities.memory_activity_repository import MemoryActivityRepository
from .activities.service import ActivityService
from .attendance.memory_attendance_repository import MemoryAttendanceRepository
from .attendance.service import AttendanceService
from .classes.memory_class_repository import MemoryClassRepository
from .classes.service import ClassService
from .database.memory import MemoryDatabase
from .reports.service import ReportService
from .students.memory_student_repository import MemoryStudentRepository
from .students.service import StudentService
from .users.memory_user_repository import MemoryUserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    db: MemoryDatabase

    users_repo: MemoryUserRepository
    students_repo: MemoryStudentRepository
    classes_repo: MemoryClassRepository
    attendance_repo: MemoryAttendanceRepository
    activities_repo: MemoryActivityRepository

    activity_service: ActivityService
    user_service: UserService
    student_service: StudentService
    class_service: ClassService
    attendance_service: AttendanceService
    report_service: ReportService


def build_container(*, db: MemoryDatabase | None = None) -> Container:
    db = db or MemoryDatabase()

    users_repo = MemoryUserRepository(db)
    students_repo = MemoryStudentRepository(db)
    classes_repo = MemoryClassRepository(db)
    attendance_repo = MemoryAttendanceRepository(db)
    activities_repo = MemoryActivityRepository(db)

    activity_service = ActivityService(activities_repo)
    user_service = UserService(users_repo, students_repo, activity_service, transaction=db.transaction)
    student_service = StudentService(
        students_repo, classes_repo, attendance_repo, activity_service, transaction=db.transaction
    )
    class_service = ClassService(classes_repo, students_repo, activity_service, transaction=db.transaction)
    attendance_service = AttendanceService(attendance_repo, students_repo, activity_service, transaction=db.transaction)
    report_service = ReportService(attendance_repo, students_repo)

    return Container(
        db=db,
        users_repo=users_repo,
        students_repo=students_repo,
        classes_repo=classes_repo,
        attendance_repo=attendance_repo,
        activities_repo=activities_repo,
        activity_service=activity_service,
        user_service=user_service,
        student_service=student_service,
        class_service=class_service,
        attendance_service=attendance_service,
        report_service=report_service,
    )
