from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ...academic_calendar.model import AcademicCalendar
from ...core.enums import RejectionReason, Role
from .base import AttendancePolicy


class StudentPolicy(AttendancePolicy):
    """Students are excused on a plain holiday, but not when an extra class is on."""

    role = Role.STUDENT

    def check(
        self,
        *,
        latitude: float,
        longitude: float,
        calendar: AcademicCalendar,
        day: date | datetime | str,
    ) -> Optional[RejectionReason]:
        reason = self.check_geolocation(latitude, longitude)
        if reason is not None:
            return reason
        if calendar.is_holiday(day) and not calendar.has_extra_class(day):
            return RejectionReason.HOLIDAY_NO_EXTRA_CLASS
        return None
