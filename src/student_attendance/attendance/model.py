from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's attendance on one day."""

    id: int
    student_id: int
    work_date: date
    status: AttendanceStatus
    time: Optional[str] = None
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "studentId": self.student_id,
            "date": self.work_date.isoformat(),
            "status": self.status.value,
            "time": self.time,
            "notes": self.notes,
        }
