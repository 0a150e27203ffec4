from __future__ import annotations

from contextlib import nullcontext
from typing import Callable, ContextManager, Optional

from werkzeug.security import generate_password_hash

from ..activities.service import ActivityService
from ..common.validators import optional_text, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import ActivityType, Role
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import User
from .repository import UserRepository


class UserService:
    """Use case: manage accounts and resolve the caller's profile."""

    def __init__(
        self,
        users: UserRepository,
        students: StudentRepository,
        activities: ActivityService,
        transaction: Callable[[], ContextManager] = nullcontext,
    ):
        self._users = users
        self._students = students
        self._activities = activities
        self._transaction = transaction

    def create_account(
        self,
        *,
        username: str,
        password: str,
        full_name: str,
        role: Role,
        student_code: Optional[str] = None,
        email: Optional[str] = None,
    ) -> User:
        username = require_non_empty(username, "Username")
        full_name = require_non_empty(full_name, "Full name")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        student_code = optional_text(student_code)

        if role == Role.STUDENT and not student_code:
            raise ValidationError("Student accounts must be linked to a student ID")
        password_hash = generate_password_hash(password)
        with self._transaction():
            if self._users.get_by_username(username):
                raise ConflictError("Username already exists")
            user = self._users.create_user(
                username=username,
                password_hash=password_hash,
                full_name=full_name,
                role=role,
                student_code=student_code if role == Role.STUDENT else None,
                email=optional_text(email),
            )
        self._activities.log(ActivityType.USER, f"New user {user.username} was created.")
        return user

    def get_user(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def get_profile(self, user_id: int) -> dict:
        """Profile payload: the user, plus the linked student for student accounts."""
        user = self.get_user(user_id)
        if user.role != Role.STUDENT:
            return {"user": user.to_dict()}

        student = self._students.get_by_code(user.student_code or "")
        if not student:
            raise NotFoundError("Student profile not found")
        return {"user": user.to_dict(), "student": student.to_dict()}

    def get_linked_student_id(self, user_id: int) -> Optional[int]:
        """Primary key of the student record linked to a student account, if any."""
        user = self._users.get_by_id(user_id)
        if not user or user.role != Role.STUDENT or not user.student_code:
            return None
        student = self._students.get_by_code(user.student_code)
        return student.id if student else None
