from __future__ import annotations

from datetime import date

from ..common.validators import require_non_empty
from .model import AcademicCalendar


class CalendarService:
    def __init__(self, calendar: AcademicCalendar):
        self._calendar = calendar

    @property
    def calendar(self) -> AcademicCalendar:
        return self._calendar

    def get(self) -> dict:
        return self._calendar.to_dict()

    def add_extra_class(self, day: date | str) -> dict:
        if isinstance(day, str):
            day = require_non_empty(day, "date")
        return self._calendar.add_extra_class(day).to_dict()
