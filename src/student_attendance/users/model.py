from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an account that can act on the system.

    Note: Pure data object, storage access lives in the repositories.
    ``student_code`` links a student account to ``Student.student_id``.
    """

    user_id: int
    username: str
    password_hash: str
    full_name: str
    role: Role
    student_code: Optional[str] = None
    email: Optional[str] = None

    def to_dict(self) -> dict:
        # password_hash never leaves the service boundary
        return {
            "id": self.user_id,
            "username": self.username,
            "fullName": self.full_name,
            "role": self.role.value,
            "studentId": self.student_code,
            "email": self.email,
        }
