from __future__ import annotations

import re
from typing import Any, Optional

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError

_SCRIPT_BLOCK = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)


def require_non_empty(value: Any, field_name: str) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    if value is None or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def optional_text(value: Any) -> Optional[str]:
    """Normalize optional free-text fields: blank strings become None."""
    if value is None:
        return None
    if not isinstance(value, str):
        value = str(value)
    value = value.strip()
    return value or None


def parse_status(value: Any) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"Status must be one of: {allowed}") from None


def parse_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {field_name}")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"Invalid {field_name}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field_name}") from None
    if number <= 0:
        raise ValidationError(f"Invalid {field_name}")
    return number


def sanitize_payload(payload: Any) -> Any:
    """Strip whitespace and <script> blocks from top-level string values."""
    if not isinstance(payload, dict):
        return payload
    cleaned = {}
    for key, value in payload.items():
        if isinstance(value, str):
            value = _SCRIPT_BLOCK.sub("", value).strip()
        cleaned[key] = value
    return cleaned
