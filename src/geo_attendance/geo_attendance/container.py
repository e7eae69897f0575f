from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .academic_calendar.model import AcademicCalendar
from .academic_calendar.service import CalendarService
from .attendance.buffer import AttendanceBuffer
from .attendance.factory import AttendancePolicyFactory
from .attendance.flusher import BufferFlusher
from .attendance.model import AttendanceRecord
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: AttendanceRepository
    calendar: AcademicCalendar
    buffer: AttendanceBuffer[AttendanceRecord]

    calendar_service: CalendarService
    attendance_service: AttendanceService
    flusher: Optional[BufferFlusher] = None


def assemble(
    *,
    attendance_repo: AttendanceRepository,
    calendar: AcademicCalendar,
    conn: Optional[DatabaseConnection] = None,
    flush_interval_seconds: float = 0,
) -> Container:
    """Wire services around an already-built repository and calendar."""
    buffer: AttendanceBuffer[AttendanceRecord] = AttendanceBuffer()

    calendar_service = CalendarService(calendar)
    attendance_service = AttendanceService(
        attendance_repo,
        calendar,
        buffer,
        policy_factory=AttendancePolicyFactory(),
    )
    flusher = BufferFlusher(attendance_service, flush_interval_seconds) if flush_interval_seconds > 0 else None

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        calendar=calendar,
        buffer=buffer,
        calendar_service=calendar_service,
        attendance_service=attendance_service,
        flusher=flusher,
    )


def build_container(*, db_config: dict, calendar: AcademicCalendar, flush_interval_seconds: float = 0) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return assemble(
        attendance_repo=MySQLAttendanceRepository(conn),
        calendar=calendar,
        conn=conn,
        flush_interval_seconds=flush_interval_seconds,
    )
