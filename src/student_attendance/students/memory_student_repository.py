from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional, Sequence

from ..database.memory import MemoryDatabase
from .model import Student
from .repository import StudentRepository

TABLE = "students"


class MemoryStudentRepository(StudentRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    def list_all(self) -> Sequence[Student]:
        with self._db.transaction() as db:
            return sorted(db.table(TABLE).values(), key=lambda s: s.id)

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with self._db.transaction() as db:
            return db.table(TABLE).get(int(student_id))

    def get_by_code(self, student_code: str) -> Optional[Student]:
        with self._db.transaction() as db:
            for student in db.table(TABLE).values():
                if student.student_code == student_code:
                    return student
            return None

    def list_by_class(self, class_name: str) -> Sequence[Student]:
        return [s for s in self.list_all() if s.class_name == class_name]

    def create(self, **fields: Any) -> Student:
        with self._db.transaction() as db:
            student = Student(id=db.next_id(TABLE), **fields)
            db.table(TABLE)[student.id] = student
            return student

    def update(self, student_id: int, changes: dict) -> Optional[Student]:
        with self._db.transaction() as db:
            table = db.table(TABLE)
            existing = table.get(int(student_id))
            if not existing:
                return None
            updated = replace(existing, **changes)
            table[existing.id] = updated
            return updated

    def delete_by_id(self, student_id: int) -> bool:
        with self._db.transaction() as db:
            return db.table(TABLE).pop(int(student_id), None) is not None

    def rename_class(self, old_name: str, new_name: str) -> int:
        with self._db.transaction() as db:
            table = db.table(TABLE)
            moved = [s for s in table.values() if s.class_name == old_name]
            for student in moved:
                table[student.id] = replace(student, class_name=new_name)
            return len(moved)
