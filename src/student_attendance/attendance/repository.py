from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def find(
        self,
        *,
        work_date: Optional[date] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        student_ids: Optional[Iterable[int]] = None,
    ) -> Sequence[AttendanceRecord]:
        """All records matching every given filter, ordered by id."""

        raise NotImplementedError

    def get_for_student_and_date(self, student_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        student_id: int,
        work_date: date,
        status: AttendanceStatus,
        time: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        raise NotImplementedError

    def update(self, record_id: int, changes: dict) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def delete_for_student(self, student_id: int) -> int:
        """Remove every record of a student; returns how many were removed."""

        raise NotImplementedError
