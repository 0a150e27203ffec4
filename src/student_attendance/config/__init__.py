import os


def get_settings_module() -> str:
    # Read the environment from APP_ENV, default is 'development'
    env = os.getenv("APP_ENV", "development").lower()

    # 1. Production
    if env in {"prod", "production"}:
        return "student_attendance.config.production"

    # 2. Testing
    if env in {"test", "testing"}:
        return "student_attendance.config.testing"

    # 3. Everything else falls back to development
    return "student_attendance.config.development"
