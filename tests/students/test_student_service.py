from __future__ import annotations

import pytest

from student_attendance.core.enums import AttendanceStatus
from student_attendance.core.exceptions import NotFoundError, ValidationError


def _payload(**overrides):
    data = {
        "student_code": "ST-3001",
        "first_name": "Bao",
        "last_name": "Tran",
        "class_name": "Class 11-A",
        "email": "bao@example.com",
    }
    data.update(overrides)
    return data


def test_create_student_assigns_id_and_logs_activity(container):
    student = container.student_service.create_student(_payload())

    assert student.id == 1
    assert student.active is True
    assert student.full_name == "Bao Tran"

    latest = container.activity_service.recent(1)[0]
    assert latest.message == "New student Bao Tran was added to Class 11-A."


def test_duplicate_student_code_is_rejected(container):
    container.student_service.create_student(_payload())

    with pytest.raises(ValidationError, match="Student ID already exists"):
        container.student_service.create_student(_payload(first_name="Other"))


def test_unknown_class_is_rejected(container):
    with pytest.raises(ValidationError):
        container.student_service.create_student(_payload(class_name="Class 99-Z"))


def test_short_names_and_bad_email_are_rejected(container):
    with pytest.raises(ValidationError):
        container.student_service.create_student(_payload(first_name="B"))
    with pytest.raises(ValidationError):
        container.student_service.create_student(_payload(email="not-an-email"))


def test_blank_optional_fields_are_stored_as_none(container):
    student = container.student_service.create_student(_payload(email="", address="   "))

    assert student.email is None
    assert student.address is None


def test_update_merges_partial_changes(container):
    student = container.student_service.create_student(_payload())

    updated = container.student_service.update_student(student.id, {"phone_number": "0901234567"})

    assert updated.phone_number == "0901234567"
    assert updated.first_name == "Bao"
    assert updated.email == "bao@example.com"


def test_update_cannot_steal_another_students_code(container):
    container.student_service.create_student(_payload(student_code="ST-3001"))
    second = container.student_service.create_student(_payload(student_code="ST-3002"))

    with pytest.raises(ValidationError):
        container.student_service.update_student(second.id, {"student_code": "ST-3001"})


def test_update_missing_student_raises_not_found(container):
    with pytest.raises(NotFoundError):
        container.student_service.update_student(42, {"first_name": "Nobody"})


def test_delete_student_cascades_attendance(container):
    student = container.student_service.create_student(_payload())
    container.attendance_service.mark_attendance(
        student_id=student.id, work_date="2026-02-02", status=AttendanceStatus.PRESENT
    )

    container.student_service.delete_student(student.id)

    assert container.students_repo.get_by_id(student.id) is None
    assert container.attendance_repo.find(student_ids=[student.id]) == []
    assert container.activity_service.recent(1)[0].message == "Student Bao Tran was removed."


def test_list_students_filters_by_class(container):
    container.student_service.create_student(_payload(student_code="ST-101", class_name="Class 10-A"))
    container.student_service.create_student(_payload(student_code="ST-102", class_name="Class 10-B"))
    container.student_service.create_student(_payload(student_code="ST-103", class_name="Class 10-A", active=False))

    in_class = container.student_service.list_students(class_name="Class 10-A")
    active_in_class = container.student_service.list_students(class_name="Class 10-A", active=True)

    assert [s.student_code for s in in_class] == ["ST-101", "ST-103"]
    assert [s.student_code for s in active_in_class] == ["ST-101"]


def test_non_text_student_code_is_reported_as_such(container):
    with pytest.raises(ValidationError, match="Student ID must be text"):
        container.student_service.create_student(_payload(student_code=123))


def test_ids_are_not_reused_after_delete(container):
    first = container.student_service.create_student(_payload(student_code="ST-501"))
    container.student_service.delete_student(first.id)
    second = container.student_service.create_student(_payload(student_code="ST-502"))

    assert second.id > first.id

    old_class = container.class_service.create_class(name="Class 9-Z")
    container.class_service.delete_class(old_class.id)
    new_class = container.class_service.create_class(name="Class 9-Y")

    assert new_class.id > old_class.id


def test_concurrent_creates_keep_student_codes_unique(container, race):
    for n in range(20):
        code = f"ST-{n:04d}"
        errors = race([lambda: container.student_service.create_student(_payload(student_code=code))] * 8)
        assert len(errors) == 7

    codes = [s.student_code for s in container.students_repo.list_all()]
    assert len(codes) == len(set(codes)) == 20


def test_delete_during_marking_leaves_no_orphans(container, race):
    for attempt in range(10):
        student = container.student_service.create_student(_payload(student_code=f"ST-7{attempt:02d}"))
        marks = [
            (lambda day=day: container.attendance_service.mark_attendance(
                student_id=student.id, work_date=f"2026-03-{day:02d}", status="present"
            ))
            for day in range(1, 8)
        ]
        race(marks + [lambda: container.student_service.delete_student(student.id)])

        assert container.students_repo.get_by_id(student.id) is None
        assert container.attendance_repo.find() == []
