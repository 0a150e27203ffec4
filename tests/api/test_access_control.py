from __future__ import annotations

import pytest


@pytest.mark.parametrize(
    "path",
    [
        "/api/students",
        "/api/students/1",
        "/api/attendance",
        "/api/my-attendance",
        "/api/my-profile",
        "/api/activities",
        "/api/dashboard/stats",
        "/api/reports/attendance?startDate=2026-02-01&endDate=2026-02-02",
    ],
)
def test_anonymous_requests_get_401(client, path):
    res = client.get(path)

    assert res.status_code == 401
    assert res.get_json() == {"message": "Authentication required"}


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/api/students"),
        ("post", "/api/students"),
        ("delete", "/api/students/1"),
        ("post", "/api/classes"),
        ("get", "/api/attendance.csv"),
        ("get", "/api/reports/attendance?startDate=2026-02-01&endDate=2026-02-02"),
    ],
)
def test_students_cannot_use_teacher_routes(student_client, method, path):
    res = getattr(student_client, method)(path, json={})

    assert res.status_code == 403
    assert res.get_json() == {"message": "Teacher access required"}


def test_student_reads_only_own_record(container, student_client, enrolled_student):
    other = container.student_service.create_student(
        {"student_code": "ST-9000", "first_name": "Bob", "last_name": "Tran", "class_name": "Class 10-A"}
    )

    assert student_client.get(f"/api/students/{enrolled_student.id}").status_code == 200
    assert student_client.get(f"/api/students/{enrolled_student.id}/attendance/summary").status_code == 200

    res = student_client.get(f"/api/students/{other.id}")
    assert res.status_code == 403
    assert res.get_json() == {"message": "Access denied"}


def test_my_profile_for_student(student_client, enrolled_student):
    body = student_client.get("/api/my-profile").get_json()

    assert body["user"]["username"] == "alice"
    assert body["student"]["id"] == enrolled_student.id


def test_activities_feed_respects_limit(teacher_client, enrolled_student):
    res = teacher_client.get("/api/activities?limit=2")

    assert res.status_code == 200
    assert len(res.get_json()) == 2


def test_unexpected_errors_become_500(container, teacher_client, monkeypatch):
    def boom(**kwargs):
        raise RuntimeError("store offline")

    monkeypatch.setattr(container.student_service, "list_students", boom)

    res = teacher_client.get("/api/students")

    assert res.status_code == 500
    assert res.get_json() == {"message": "Failed to retrieve students"}
