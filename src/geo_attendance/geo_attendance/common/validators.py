from __future__ import annotations

import re

from ..core.constants import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE, USER_ID_PATTERN
from ..core.exceptions import ValidationError

_USER_ID_RE = re.compile(USER_ID_PATTERN)


def is_valid_user_id(value: str) -> bool:
    """True for identifiers like STU12 or TCH7 (whole string must match)."""
    if not isinstance(value, str):
        return False
    return _USER_ID_RE.fullmatch(value) is not None


def is_valid_geolocation(latitude: float, longitude: float) -> bool:
    # NaN compares False against every bound, so it is rejected here too.
    return MIN_LATITUDE <= latitude <= MAX_LATITUDE and MIN_LONGITUDE <= longitude <= MAX_LONGITUDE


def require_number(value: object, field_name: str) -> float:
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    return number


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()
