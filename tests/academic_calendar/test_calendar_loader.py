from __future__ import annotations

import json
import logging

import pytest

from src.geo_attendance.geo_attendance.academic_calendar.loader import load_calendar_file, read_calendar_file
from src.geo_attendance.geo_attendance.core.exceptions import ConfigurationError


def test_loads_calendar_file(tmp_path):
    path = tmp_path / "calendar.json"
    path.write_text(json.dumps({"holidays": ["2024-01-01"], "extraClasses": ["2024-01-06"]}), encoding="utf-8")

    cal = load_calendar_file(path)

    assert cal.is_holiday("2024-01-01")
    assert cal.has_extra_class("2024-01-06")


def test_read_raises_on_invalid_json(tmp_path):
    path = tmp_path / "calendar.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        read_calendar_file(path)


def test_missing_file_falls_back_to_empty_calendar(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        cal = load_calendar_file(tmp_path / "missing.json")

    assert cal.to_dict() == {"holidays": [], "extraClasses": []}
    assert "Failed to load calendar" in caplog.text


def test_malformed_dates_fall_back_to_empty_calendar(tmp_path, caplog):
    path = tmp_path / "calendar.json"
    path.write_text(json.dumps({"holidays": ["2024-02-30"]}), encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        cal = load_calendar_file(path)

    assert cal.holidays == frozenset()
    assert "2024-02-30" in caplog.text
