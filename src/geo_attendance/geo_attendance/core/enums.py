from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Participant roles that can check in."""

    STUDENT = "Student"
    TEACHER = "Teacher"

    @classmethod
    def parse(cls, value: object) -> "Role | None":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class RejectionReason(str, Enum):
    """Machine-readable reasons a check-in is refused."""

    INVALID_GEOLOCATION = "invalid_geolocation"
    HOLIDAY_NO_EXTRA_CLASS = "holiday_no_extra_class"
    UNKNOWN_ROLE = "unknown_role"
    MALFORMED_IDENTIFIER = "malformed_identifier"
