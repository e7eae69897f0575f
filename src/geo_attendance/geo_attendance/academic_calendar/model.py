from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from datetime import date, datetime

from ..common.datetime_utils import parse_iso_date, to_date_key
from ..core.exceptions import ConfigurationError, ValidationError


def _normalize_dates(values: object, field_name: str) -> frozenset[str]:
    if values is None:
        return frozenset()
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise ConfigurationError(f"{field_name} must be a list of YYYY-MM-DD dates")

    dates: set[str] = set()
    for value in values:
        if not isinstance(value, str):
            raise ConfigurationError(f"{field_name} contains a non-string date: {value!r}")
        try:
            dates.add(parse_iso_date(value.strip()).isoformat())
        except ValueError:
            raise ConfigurationError(f"{field_name} contains a malformed date: {value!r}") from None
    return frozenset(dates)


class AcademicCalendar:
    """Holiday and extra-class dates shared by every request.

    Both sets are immutable snapshots swapped under a lock on update, so readers
    never need the lock and never see a half-updated set. A date may be both a
    holiday and an extra-class day.
    """

    def __init__(self, holidays: Iterable[str] = (), extra_classes: Iterable[str] = ()):
        self._holidays = _normalize_dates(holidays, "holidays")
        self._extra_classes = _normalize_dates(extra_classes, "extraClasses")
        self._write_lock = threading.Lock()

    @classmethod
    def load(cls, config: Mapping) -> "AcademicCalendar":
        """Build a calendar from ``{"holidays": [...], "extraClasses": [...]}``.

        Missing keys mean an empty set; anything malformed raises ConfigurationError.
        """
        if not isinstance(config, Mapping):
            raise ConfigurationError("calendar config must be an object")
        return cls(config.get("holidays"), config.get("extraClasses"))

    @property
    def holidays(self) -> frozenset[str]:
        return self._holidays

    @property
    def extra_classes(self) -> frozenset[str]:
        return self._extra_classes

    def is_holiday(self, day: date | datetime | str) -> bool:
        return to_date_key(day) in self._holidays

    def has_extra_class(self, day: date | datetime | str) -> bool:
        return to_date_key(day) in self._extra_classes

    def add_extra_class(self, day: date | datetime | str) -> "AcademicCalendar":
        """Schedule an extra class on ``day``; mutates this calendar and returns it."""
        if isinstance(day, str):
            try:
                key = parse_iso_date(day.strip()).isoformat()
            except ValueError:
                raise ValidationError(f"Invalid date: {day!r}") from None
        elif isinstance(day, (date, datetime)):
            key = to_date_key(day)
        else:
            raise ValidationError(f"Invalid date: {day!r}")

        with self._write_lock:
            if key not in self._extra_classes:
                self._extra_classes = self._extra_classes | {key}
        return self

    def to_dict(self) -> dict:
        return {
            "holidays": sorted(self._holidays),
            "extraClasses": sorted(self._extra_classes),
        }
