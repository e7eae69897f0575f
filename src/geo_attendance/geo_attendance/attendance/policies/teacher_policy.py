from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ...academic_calendar.model import AcademicCalendar
from ...core.enums import RejectionReason, Role
from .base import AttendancePolicy


class TeacherPolicy(AttendancePolicy):
    """Teachers may check in on any day; only the geolocation rule applies."""

    role = Role.TEACHER

    def check(
        self,
        *,
        latitude: float,
        longitude: float,
        calendar: AcademicCalendar,
        day: date | datetime | str,
    ) -> Optional[RejectionReason]:
        return self.check_geolocation(latitude, longitude)
