from __future__ import annotations

from typing import Optional

from ..core.enums import Role
from ..database.memory import MemoryDatabase
from .model import User
from .repository import UserRepository

TABLE = "users"


class MemoryUserRepository(UserRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    def get_by_id(self, user_id: int) -> Optional[User]:
        with self._db.transaction() as db:
            return db.table(TABLE).get(int(user_id))

    def get_by_username(self, username: str) -> Optional[User]:
        with self._db.transaction() as db:
            for user in db.table(TABLE).values():
                if user.username == username:
                    return user
            return None

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
        with self._db.transaction() as db:
            user = User(
                user_id=db.next_id(TABLE),
                username=username,
                password_hash=password_hash,
                full_name=full_name,
                role=role,
                student_code=student_code,
                email=email,
            )
            db.table(TABLE)[user.user_id] = user
            return user
