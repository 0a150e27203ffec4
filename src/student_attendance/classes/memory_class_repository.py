from __future__ import annotations

from typing import Optional, Sequence

from ..database.memory import MemoryDatabase
from .model import SchoolClass
from .repository import ClassRepository

TABLE = "classes"


class MemoryClassRepository(ClassRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    def list_all(self) -> Sequence[SchoolClass]:
        with self._db.transaction() as db:
            return sorted(db.table(TABLE).values(), key=lambda c: c.id)

    def get_by_id(self, class_id: int) -> Optional[SchoolClass]:
        with self._db.transaction() as db:
            return db.table(TABLE).get(int(class_id))

    def get_by_name(self, name: str) -> Optional[SchoolClass]:
        with self._db.transaction() as db:
            for item in db.table(TABLE).values():
                if item.name == name:
                    return item
            return None

    def create(self, *, name: str, description: Optional[str] = None) -> SchoolClass:
        with self._db.transaction() as db:
            item = SchoolClass(id=db.next_id(TABLE), name=name, description=description)
            db.table(TABLE)[item.id] = item
            return item

    def update(self, class_id: int, *, name: str, description: Optional[str]) -> Optional[SchoolClass]:
        with self._db.transaction() as db:
            table = db.table(TABLE)
            if int(class_id) not in table:
                return None
            item = SchoolClass(id=int(class_id), name=name, description=description)
            table[item.id] = item
            return item

    def delete_by_id(self, class_id: int) -> bool:
        with self._db.transaction() as db:
            return db.table(TABLE).pop(int(class_id), None) is not None
