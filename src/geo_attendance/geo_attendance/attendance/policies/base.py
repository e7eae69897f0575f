from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Optional

from ...academic_calendar.model import AcademicCalendar
from ...common.validators import is_valid_geolocation
from ...core.enums import RejectionReason, Role


class AttendancePolicy(ABC):
    """Strategy Pattern: one rule set per role, same contract.

    Policies hold no state; a single instance per role is shared by every request.
    """

    role: Role

    @abstractmethod
    def check(
        self,
        *,
        latitude: float,
        longitude: float,
        calendar: AcademicCalendar,
        day: date | datetime | str,
    ) -> Optional[RejectionReason]:
        """Return the reason to reject, or None to accept."""
        raise NotImplementedError

    @staticmethod
    def check_geolocation(latitude: float, longitude: float) -> Optional[RejectionReason]:
        if not is_valid_geolocation(latitude, longitude):
            return RejectionReason.INVALID_GEOLOCATION
        return None
