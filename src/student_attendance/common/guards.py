from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError


def current_user_id() -> int:
    if "user_id" not in session:
        raise AuthenticationError("Authentication required")
    return int(session["user_id"])


def current_role() -> Optional[Role]:
    try:
        return Role(session.get("role"))
    except ValueError:
        return None


def is_teacher() -> bool:
    return "user_id" in session and current_role() == Role.TEACHER


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"message": "Authentication required"}), 401
        return view(*args, **kwargs)

    return wrapper


def teacher_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"message": "Authentication required"}), 401

        if current_role() != Role.TEACHER:
            return jsonify({"message": "Teacher access required"}), 403

        return view(*args, **kwargs)

    return wrapper


def ensure_owner_or_teacher(user_service, student_id: int) -> None:
    """Teachers see every student; a student only their own linked record."""
    if is_teacher():
        return
    linked = user_service.get_linked_student_id(current_user_id())
    if linked is None or linked != student_id:
        raise AuthorizationError("Access denied")
