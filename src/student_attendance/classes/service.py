from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import Callable, ContextManager, Optional

from ..activities.service import ActivityService
from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_CLASSES
from ..core.enums import ActivityType
from ..core.exceptions import ConflictError, NotFoundError
from ..students.repository import StudentRepository
from .model import SchoolClass
from .repository import ClassRepository

logger = logging.getLogger(__name__)


class ClassService:
    """Use case: manage classes. Students reference a class by its name."""

    def __init__(
        self,
        classes: ClassRepository,
        students: StudentRepository,
        activities: ActivityService,
        transaction: Callable[[], ContextManager] = nullcontext,
    ):
        self._classes = classes
        self._students = students
        self._activities = activities
        self._transaction = transaction

    def list_classes(self) -> list[dict]:
        counts: dict[str, int] = {}
        for student in self._students.list_all():
            counts[student.class_name] = counts.get(student.class_name, 0) + 1

        out = []
        for item in self._classes.list_all():
            row = item.to_dict()
            row["studentCount"] = counts.get(item.name, 0)
            out.append(row)
        return out

    def get_class(self, class_id: int) -> SchoolClass:
        item = self._classes.get_by_id(class_id)
        if not item:
            raise NotFoundError("Class not found")
        return item

    def create_class(self, *, name: str, description: Optional[str] = None) -> SchoolClass:
        name = require_non_empty(name, "Class name")
        with self._transaction():
            if self._classes.get_by_name(name):
                raise ConflictError("Class name already exists")
            item = self._classes.create(name=name, description=optional_text(description))

        self._activities.log(ActivityType.CLASS, f"New class {item.name} was created.")
        return item

    def update_class(self, class_id: int, *, name: Optional[str] = None, description: Optional[str] = None) -> SchoolClass:
        existing = self.get_class(class_id)

        new_name = require_non_empty(name, "Class name") if name is not None else existing.name
        new_description = optional_text(description) if description is not None else existing.description

        with self._transaction():
            if new_name != existing.name:
                other = self._classes.get_by_name(new_name)
                if other and other.id != existing.id:
                    raise ConflictError("Class name already exists")

            updated = self._classes.update(existing.id, name=new_name, description=new_description)
            if not updated:
                raise NotFoundError("Class not found")

            moved = self._students.rename_class(existing.name, new_name) if new_name != existing.name else 0

        if new_name != existing.name:
            logger.info("renamed class %r -> %r (%s students moved)", existing.name, new_name, moved)

        self._activities.log(ActivityType.CLASS, f"Class {updated.name} was updated.")
        return updated

    def delete_class(self, class_id: int) -> None:
        existing = self.get_class(class_id)
        with self._transaction():
            if self._students.list_by_class(existing.name):
                raise ConflictError("Class still has enrolled students")
            if not self._classes.delete_by_id(existing.id):
                raise NotFoundError("Class not found")

        self._activities.log(ActivityType.CLASS, f"Class {existing.name} was removed.")

    def seed_defaults(self) -> int:
        """Create the default classes that do not exist yet; returns how many were added."""
        added = 0
        for name, description in DEFAULT_CLASSES:
            if not self._classes.get_by_name(name):
                self.create_class(name=name, description=description)
                added += 1
        return added
