from __future__ import annotations

from datetime import datetime

from student_attendance.activities import service as activity_module
from student_attendance.activities.memory_activity_repository import MemoryActivityRepository
from student_attendance.activities.service import ActivityService
from student_attendance.core.enums import ActivityType
from student_attendance.database.memory import MemoryDatabase


def test_recent_is_newest_first_and_limited(monkeypatch):
    stamps = iter([datetime(2026, 2, 1, 9, 0), datetime(2026, 2, 1, 10, 0), datetime(2026, 2, 1, 8, 0)])
    monkeypatch.setattr(activity_module, "now_local", lambda: next(stamps))

    svc = ActivityService(MemoryActivityRepository(MemoryDatabase()))
    svc.log(ActivityType.STUDENT, "nine")
    svc.log(ActivityType.ATTENDANCE, "ten")
    svc.log(ActivityType.CLASS, "eight")

    assert [a.message for a in svc.recent()] == ["ten", "nine", "eight"]
    assert [a.message for a in svc.recent(2)] == ["ten", "nine"]
    assert svc.recent("1")[0].to_dict() == {
        "id": 2,
        "message": "ten",
        "type": "attendance",
        "timestamp": "2026-02-01T10:00:00",
    }


def test_bad_limits_return_everything():
    svc = ActivityService(MemoryActivityRepository(MemoryDatabase()))
    for i in range(3):
        svc.log(ActivityType.USER, f"user {i}")

    assert len(svc.recent("abc")) == 3
    assert len(svc.recent(0)) == 3
    assert len(svc.recent(-5)) == 3
