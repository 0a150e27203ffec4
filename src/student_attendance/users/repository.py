from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note: the service layer depends on this interface, not on a concrete store.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        username: str,
        password_hash: str,
        full_name: str,
        role: Role,
        student_code: Optional[str] = None,
        email: Optional[str] = None,
    ) -> User:
        raise NotImplementedError
