from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import iter_dates
from ..core.constants import MAX_REPORT_DAYS
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository

REPORT_CSV_FIELDS = ["Date", "Present", "Late", "Absent", "Excused", "Total"]


@dataclass(frozen=True)
class DashboardStats:
    total_students: int
    present_today: int
    absent_today: int
    late_today: int
    excused_today: int

    def to_dict(self) -> dict:
        return {
            "totalStudents": self.total_students,
            "presentToday": self.present_today,
            "absentToday": self.absent_today,
            "lateToday": self.late_today,
            "excusedToday": self.excused_today,
        }


@dataclass(frozen=True)
class DailyAttendance:
    day: date
    present: int = 0
    absent: int = 0
    late: int = 0
    excused: int = 0

    @property
    def total(self) -> int:
        return self.present + self.absent + self.late + self.excused

    def to_dict(self) -> dict:
        return {
            "date": self.day.isoformat(),
            "present": self.present,
            "absent": self.absent,
            "late": self.late,
            "excused": self.excused,
            "total": self.total,
        }


def _count_by_status(records) -> dict[AttendanceStatus, int]:
    counts = {status: 0 for status in AttendanceStatus}
    for r in records:
        counts[r.status] += 1
    return counts


def attendance_rate(present: int, total: int) -> int:
    """Whole-number percentage of present days; 0 when nothing was recorded."""
    if total == 0:
        return 0
    # round-half-up, matching how the dashboard displays percentages
    return int(present * 100 / total + 0.5)


class ReportService:
    """Aggregated views over attendance: dashboard counts, daily stats, summaries."""

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def dashboard_stats(self, *, today: date) -> DashboardStats:
        students = self._students.list_all()
        records = self._attendance.find(work_date=today, student_ids=[s.id for s in students])
        counts = _count_by_status(records)
        return DashboardStats(
            total_students=len(students),
            present_today=counts[AttendanceStatus.PRESENT],
            absent_today=counts[AttendanceStatus.ABSENT],
            late_today=counts[AttendanceStatus.LATE],
            excused_today=counts[AttendanceStatus.EXCUSED],
        )

    def attendance_stats(self, *, start: date, end: date, class_name: Optional[str] = None) -> list[DailyAttendance]:
        """One entry per calendar day in [start, end], zero-filled."""
        if start > end:
            raise ValidationError("Start date must not be after end date")
        if (end - start).days + 1 > MAX_REPORT_DAYS:
            raise ValidationError(f"Date range must not exceed {MAX_REPORT_DAYS} days")

        students = self._students.list_by_class(class_name) if class_name else self._students.list_all()
        records = self._attendance.find(start_date=start, end_date=end, student_ids=[s.id for s in students])

        by_day: dict[date, list] = {}
        for r in records:
            by_day.setdefault(r.work_date, []).append(r)

        out = []
        for day in iter_dates(start, end):
            counts = _count_by_status(by_day.get(day, []))
            out.append(
                DailyAttendance(
                    day=day,
                    present=counts[AttendanceStatus.PRESENT],
                    absent=counts[AttendanceStatus.ABSENT],
                    late=counts[AttendanceStatus.LATE],
                    excused=counts[AttendanceStatus.EXCUSED],
                )
            )
        return out

    @staticmethod
    def summarize(daily: Sequence[DailyAttendance]) -> dict:
        total_days = len(daily)
        totals = {
            "present": sum(d.present for d in daily),
            "late": sum(d.late for d in daily),
            "absent": sum(d.absent for d in daily),
            "excused": sum(d.excused for d in daily),
        }

        def avg(key: str) -> int:
            return int(totals[key] / total_days + 0.5) if total_days else 0

        return {
            "totalDays": total_days,
            "totalPresent": totals["present"],
            "totalLate": totals["late"],
            "totalAbsent": totals["absent"],
            "totalExcused": totals["excused"],
            "averagePresent": avg("present"),
            "averageLate": avg("late"),
            "averageAbsent": avg("absent"),
        }

    def student_summary(self, student_id: int, *, start: Optional[date] = None, end: Optional[date] = None) -> dict:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student not found")
        if start and end and start > end:
            raise ValidationError("Start date must not be after end date")

        records = self._attendance.find(start_date=start, end_date=end, student_ids=[student.id])
        counts = _count_by_status(records)
        total = len(records)
        return {
            "studentId": student.id,
            "studentCode": student.student_code,
            "name": student.full_name,
            "className": student.class_name,
            "present": counts[AttendanceStatus.PRESENT],
            "absent": counts[AttendanceStatus.ABSENT],
            "late": counts[AttendanceStatus.LATE],
            "excused": counts[AttendanceStatus.EXCUSED],
            "total": total,
            "attendanceRate": attendance_rate(counts[AttendanceStatus.PRESENT], total),
        }

    @staticmethod
    def csv_rows(daily: Sequence[DailyAttendance]) -> list[dict]:
        return [
            {
                "Date": d.day.isoformat(),
                "Present": d.present,
                "Late": d.late,
                "Absent": d.absent,
                "Excused": d.excused,
                "Total": d.total,
            }
            for d in daily
        ]
