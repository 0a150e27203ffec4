from __future__ import annotations

import pytest

from student_attendance.core.constants import DEFAULT_CLASSES
from student_attendance.core.exceptions import ConflictError, NotFoundError, ValidationError


def test_default_classes_are_seeded_once(container):
    names = [c["name"] for c in container.class_service.list_classes()]
    assert names == [name for name, _ in DEFAULT_CLASSES]

    assert container.class_service.seed_defaults() == 0


def test_list_classes_counts_enrolled_students(container):
    container.student_service.create_student(
        {"student_code": "ST-500", "first_name": "An", "last_name": "Le", "class_name": "Class 12-A"}
    )

    rows = {c["name"]: c for c in container.class_service.list_classes()}
    assert rows["Class 12-A"]["studentCount"] == 1
    assert rows["Class 10-A"]["studentCount"] == 0


def test_create_class_requires_unique_name(container):
    with pytest.raises(ConflictError):
        container.class_service.create_class(name="Class 10-A")
    with pytest.raises(ValidationError):
        container.class_service.create_class(name="   ")


def test_rename_class_moves_students(container):
    cls = container.classes_repo.get_by_name("Class 11-B")
    student = container.student_service.create_student(
        {"student_code": "ST-600", "first_name": "Minh", "last_name": "Vo", "class_name": "Class 11-B"}
    )

    updated = container.class_service.update_class(cls.id, name="Class 11-C")

    assert updated.name == "Class 11-C"
    assert updated.description == cls.description
    assert container.students_repo.get_by_id(student.id).class_name == "Class 11-C"


def test_rename_to_existing_name_conflicts(container):
    cls = container.classes_repo.get_by_name("Class 11-B")
    with pytest.raises(ConflictError):
        container.class_service.update_class(cls.id, name="Class 10-A")


def test_delete_class_with_students_is_refused(container):
    cls = container.classes_repo.get_by_name("Class 10-B")
    container.student_service.create_student(
        {"student_code": "ST-700", "first_name": "Lan", "last_name": "Pham", "class_name": "Class 10-B"}
    )

    with pytest.raises(ConflictError):
        container.class_service.delete_class(cls.id)


def test_delete_empty_class(container):
    cls = container.classes_repo.get_by_name("Class 10-B")

    container.class_service.delete_class(cls.id)

    assert container.classes_repo.get_by_id(cls.id) is None
    with pytest.raises(NotFoundError):
        container.class_service.delete_class(cls.id)
