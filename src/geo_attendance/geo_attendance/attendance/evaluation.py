from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..academic_calendar.model import AcademicCalendar
from ..core.enums import RejectionReason
from .factory import AttendancePolicyFactory
from .model import AttendanceReport, EvaluationResult

_default_factory = AttendancePolicyFactory()


def evaluate(
    role: object,
    latitude: float,
    longitude: float,
    calendar: AcademicCalendar,
    day: date | datetime | str,
    *,
    user_id: int,
    name: Optional[str] = None,
    factory: Optional[AttendancePolicyFactory] = None,
) -> EvaluationResult:
    """Decide whether a check-in is accepted.

    Never raises for bad input: an unknown role, a holiday without an extra
    class (students only) or out-of-range coordinates all come back as a
    rejected result carrying the reason code. ``day`` may be a date or a
    ``YYYY-MM-DD[ HH:MM:SS]`` string; only the date part is used.
    """
    policy = (factory or _default_factory).for_role(role)
    if policy is None:
        return EvaluationResult.reject(RejectionReason.UNKNOWN_ROLE)

    reason = policy.check(latitude=latitude, longitude=longitude, calendar=calendar, day=day)
    if reason is not None:
        return EvaluationResult.reject(reason)

    return EvaluationResult.accept(AttendanceReport(user_id=user_id, role=policy.role, name=name))
