from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from student_attendance.core.enums import Role
from student_attendance.core.exceptions import ConflictError, NotFoundError, ValidationError


def test_create_account_hashes_password(container):
    user = container.user_service.create_account(
        username="teacher1", password="secret123", full_name="Mr. Tran", role=Role.TEACHER
    )

    assert user.password_hash != "secret123"
    assert check_password_hash(user.password_hash, "secret123")
    assert "password_hash" not in user.to_dict()
    assert container.activity_service.recent(1)[0].message == "New user teacher1 was created."


def test_duplicate_username_and_short_password(container):
    container.user_service.create_account(username="t", password="secret123", full_name="T", role=Role.TEACHER)

    with pytest.raises(ConflictError):
        container.user_service.create_account(username="t", password="secret123", full_name="T2", role=Role.TEACHER)
    with pytest.raises(ValidationError):
        container.user_service.create_account(username="u", password="123", full_name="U", role=Role.TEACHER)


def test_student_account_requires_student_code(container):
    with pytest.raises(ValidationError):
        container.user_service.create_account(username="s", password="secret123", full_name="S", role=Role.STUDENT)


def test_student_profile_includes_linked_student(container, student_user, enrolled_student):
    profile = container.user_service.get_profile(student_user.user_id)

    assert profile["user"]["role"] == "student"
    assert profile["student"]["studentId"] == enrolled_student.student_code
    assert container.user_service.get_linked_student_id(student_user.user_id) == enrolled_student.id


def test_teacher_profile_has_no_student(container, teacher):
    assert container.user_service.get_profile(teacher.user_id) == {"user": teacher.to_dict()}
    assert container.user_service.get_linked_student_id(teacher.user_id) is None


def test_broken_link_raises_not_found(container):
    user = container.user_service.create_account(
        username="ghost", password="secret123", full_name="Ghost", role=Role.STUDENT, student_code="ST-404"
    )

    with pytest.raises(NotFoundError):
        container.user_service.get_profile(user.user_id)
