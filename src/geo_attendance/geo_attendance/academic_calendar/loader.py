from __future__ import annotations

import json
import logging
from pathlib import Path

from ..core.exceptions import ConfigurationError
from .model import AcademicCalendar

logger = logging.getLogger(__name__)


def read_calendar_file(path: str | Path) -> AcademicCalendar:
    """Read a calendar JSON file; raises ConfigurationError on any failure."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"cannot read calendar file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"calendar file {path} is not valid JSON: {e}") from e
    return AcademicCalendar.load(data)


def load_calendar_file(path: str | Path) -> AcademicCalendar:
    """Load the calendar at startup, falling back to an empty one.

    A broken calendar source must not keep the service from starting.
    """
    try:
        calendar = read_calendar_file(path)
    except ConfigurationError as e:
        logger.warning("Failed to load calendar, starting with an empty one: %s", e)
        return AcademicCalendar()

    logger.info(
        "Loaded calendar from %s (holidays=%d, extra_classes=%d)",
        path,
        len(calendar.holidays),
        len(calendar.extra_classes),
    )
    return calendar
