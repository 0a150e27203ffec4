from __future__ import annotations

import logging

from ..container import Container
from ..core.enums import Role

logger = logging.getLogger(__name__)

DEMO_STUDENT = {
    "student_code": "ST-1001",
    "first_name": "Demo",
    "last_name": "Student",
    "class_name": "Class 10-A",
    "email": "demo.student@example.com",
}


def seed_default_classes(container: Container) -> None:
    added = container.class_service.seed_defaults()
    logger.info("default classes ready (added=%s)", added)


def ensure_demo_users(container: Container) -> None:
    """Demo teacher and student accounts plus the student's roster entry.

    Idempotent: existing usernames/student IDs are left untouched.
    """
    if not container.students_repo.get_by_code(DEMO_STUDENT["student_code"]):
        if not container.classes_repo.get_by_name(DEMO_STUDENT["class_name"]):
            container.class_service.create_class(name=DEMO_STUDENT["class_name"])
        container.student_service.create_student(DEMO_STUDENT)

    def upsert_user(username: str, password: str, full_name: str, role: Role, student_code=None) -> None:
        if container.users_repo.get_by_username(username):
            return
        container.user_service.create_account(
            username=username,
            password=password,
            full_name=full_name,
            role=role,
            student_code=student_code,
        )

    upsert_user("teacher", "teacher123", "Demo Teacher", Role.TEACHER)
    upsert_user("student", "student123", "Demo Student", Role.STUDENT, DEMO_STUDENT["student_code"])
    logger.info("demo seed ready")
