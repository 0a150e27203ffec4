from __future__ import annotations

import os
import sys
import threading
from datetime import datetime

import pytest

os.environ.setdefault("APP_ENV", "testing")

from student_attendance.common import datetime_utils
from student_attendance.container import build_container
from student_attendance.core.enums import Role
from student_attendance.core.exceptions import DomainError
from student_attendance.database.bootstrap import seed_default_classes
from student_attendance.main import create_app


@pytest.fixture
def fixed_now(monkeypatch):
    now = datetime(2026, 2, 2, 8, 0, 0)
    monkeypatch.setattr(datetime_utils, "now_local", lambda: now)
    return now


@pytest.fixture
def container():
    c = build_container()
    seed_default_classes(c)
    return c


@pytest.fixture
def app(container):
    app = create_app({"TESTING": True, "SEED_DEFAULT_CLASSES": False, "AUTO_SEED_DEMO": False}, container=container)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def login_as(client, user) -> None:
    with client.session_transaction() as sess:
        sess["user_id"] = user.user_id
        sess["role"] = user.role.value
        sess["name"] = user.full_name


@pytest.fixture
def teacher(container):
    return container.user_service.create_account(
        username="mrs.smith",
        password="secret123",
        full_name="Jane Smith",
        role=Role.TEACHER,
    )


@pytest.fixture
def teacher_client(client, teacher):
    login_as(client, teacher)
    return client


@pytest.fixture
def enrolled_student(container):
    return container.student_service.create_student(
        {
            "student_code": "ST-2001",
            "first_name": "Alice",
            "last_name": "Nguyen",
            "class_name": "Class 10-A",
        }
    )


@pytest.fixture
def student_user(container, enrolled_student):
    return container.user_service.create_account(
        username="alice",
        password="secret123",
        full_name="Alice Nguyen",
        role=Role.STUDENT,
        student_code=enrolled_student.student_code,
    )


@pytest.fixture
def student_client(client, student_user):
    login_as(client, student_user)
    return client


@pytest.fixture
def login(client):
    def _login(user):
        login_as(client, user)
        return client

    return _login


@pytest.fixture
def race():
    """Run callables on separate threads released together; returns the domain errors raised."""
    previous = sys.getswitchinterval()
    sys.setswitchinterval(1e-6)

    def _race(targets):
        barrier = threading.Barrier(len(targets))
        errors = []
        lock = threading.Lock()

        def run(target):
            barrier.wait()
            try:
                target()
            except DomainError as e:
                with lock:
                    errors.append(e)

        threads = [threading.Thread(target=run, args=(t,)) for t in targets]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        return errors

    yield _race
    sys.setswitchinterval(previous)
