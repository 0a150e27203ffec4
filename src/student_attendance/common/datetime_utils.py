from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_date_field(value, field_name: str) -> date:
    """Like parse_iso_date, but raises ValidationError for bad input."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format") from None


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()
