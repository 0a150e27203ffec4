from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from .config import get_settings_module
from .core.constants import DEFAULT_SESSION_DAYS

from .database.bootstrap import ensure_demo_users, seed_default_classes

from .container import Container, build_container
from .activities.controller import register as register_activities
from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .reports.controller import register as register_reports
from .students.controller import register as register_students
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SETTING_NAMES = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
    "CORS_ORIGINS",
    "SESSION_DAYS",
    "SEED_DEFAULT_CLASSES",
    "AUTO_SEED_DEMO",
)


def _load_settings(overrides: Optional[dict]) -> dict:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    values = {name: getattr(settings, name, None) for name in SETTING_NAMES}
    values["SETTINGS_MODULE"] = settings_module
    values.update(overrides or {})
    return values


def create_app(overrides: Optional[dict] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    settings = _load_settings(overrides)

    logging.basicConfig(
        level=str(settings.get("LOG_LEVEL") or "INFO").upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG"))
    app.config["TESTING"] = bool(settings.get("TESTING"))
    app.permanent_session_lifetime = timedelta(days=int(settings.get("SESSION_DAYS") or DEFAULT_SESSION_DAYS))

    CORS(app, resources={r"/api/*": {"origins": settings.get("CORS_ORIGINS") or []}}, supports_credentials=True)

    logger.info("[student-attendance] settings=%s", settings["SETTINGS_MODULE"])

    container = container or build_container()
    if settings.get("SEED_DEFAULT_CLASSES"):
        seed_default_classes(container)
    if settings.get("AUTO_SEED_DEMO"):
        ensure_demo_users(container)

    app.extensions["student_attendance"] = container

    register_users(app, container)
    register_students(app, container)
    register_classes(app, container)
    register_attendance(app, container)
    register_activities(app, container)
    register_reports(app, container)

    return app
