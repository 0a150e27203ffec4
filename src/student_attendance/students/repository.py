from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def get_by_code(self, student_code: str) -> Optional[Student]:
        raise NotImplementedError

    def list_by_class(self, class_name: str) -> Sequence[Student]:
        raise NotImplementedError

    def create(self, **fields: Any) -> Student:
        raise NotImplementedError

    def update(self, student_id: int, changes: dict) -> Optional[Student]:
        raise NotImplementedError

    def delete_by_id(self, student_id: int) -> bool:
        raise NotImplementedError

    def rename_class(self, old_name: str, new_name: str) -> int:
        """Move every student of ``old_name`` to ``new_name``; returns how many moved."""

        raise NotImplementedError
