from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Iterable, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.memory import MemoryDatabase
from .model import AttendanceRecord
from .repository import AttendanceRepository

TABLE = "attendance"


class MemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        with self._db.transaction() as db:
            return db.table(TABLE).get(int(record_id))

    def find(
        self,
        *,
        work_date: Optional[date] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        student_ids: Optional[Iterable[int]] = None,
    ) -> Sequence[AttendanceRecord]:
        wanted = set(student_ids) if student_ids is not None else None
        with self._db.transaction() as db:
            records = sorted(db.table(TABLE).values(), key=lambda r: r.id)

        out = []
        for r in records:
            if work_date is not None and r.work_date != work_date:
                continue
            if start_date is not None and r.work_date < start_date:
                continue
            if end_date is not None and r.work_date > end_date:
                continue
            if wanted is not None and r.student_id not in wanted:
                continue
            out.append(r)
        return out

    def get_for_student_and_date(self, student_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with self._db.transaction() as db:
            for r in db.table(TABLE).values():
                if r.student_id == student_id and r.work_date == work_date:
                    return r
            return None

    def create(
        self,
        *,
        student_id: int,
        work_date: date,
        status: AttendanceStatus,
        time: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        with self._db.transaction() as db:
            record = AttendanceRecord(
                id=db.next_id(TABLE),
                student_id=student_id,
                work_date=work_date,
                status=status,
                time=time,
                notes=notes,
            )
            db.table(TABLE)[record.id] = record
            return record

    def update(self, record_id: int, changes: dict) -> Optional[AttendanceRecord]:
        with self._db.transaction() as db:
            table = db.table(TABLE)
            existing = table.get(int(record_id))
            if not existing:
                return None
            updated = replace(existing, **changes)
            table[existing.id] = updated
            return updated

    def delete_for_student(self, student_id: int) -> int:
        with self._db.transaction() as db:
            table = db.table(TABLE)
            doomed = [rid for rid, r in table.items() if r.student_id == student_id]
            for rid in doomed:
                del table[rid]
            return len(doomed)
