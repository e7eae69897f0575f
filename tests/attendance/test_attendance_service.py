from __future__ import annotations

from datetime import datetime

import pytest

from src.geo_attendance.geo_attendance.academic_calendar.model import AcademicCalendar
from src.geo_attendance.geo_attendance.attendance.buffer import AttendanceBuffer
from src.geo_attendance.geo_attendance.attendance.model import AttendanceRecord
from src.geo_attendance.geo_attendance.attendance.service import AttendanceService, parse_user_id
from src.geo_attendance.geo_attendance.core.enums import RejectionReason, Role
from src.geo_attendance.geo_attendance.core.exceptions import ValidationError


class InMemoryAttendance:
    def __init__(self):
        self.rows: list[AttendanceRecord] = []
        self.fail_next = False

    def insert_many(self, records):
        if self.fail_next:
            self.fail_next = False
            raise ConnectionError("store down")
        self.rows.extend(records)
        return len(records)

    def list_all(self):
        return list(self.rows)


NEW_YEAR = datetime(2024, 1, 1, 9, 30, 0)
WORKDAY = datetime(2024, 1, 2, 9, 30, 0)


def _service(calendar: AcademicCalendar | None = None):
    repo = InMemoryAttendance()
    buffer = AttendanceBuffer()
    svc = AttendanceService(repo, calendar or AcademicCalendar(holidays=["2024-01-01"]), buffer)
    return svc, repo, buffer


def test_accepted_checkin_is_buffered_with_acceptance_time():
    svc, repo, buffer = _service()

    result = svc.mark(user_id=5, role="Student", latitude=12.9, longitude=77.6, now=WORKDAY)

    assert result.accepted
    assert repo.rows == []
    assert buffer.drain() == [
        AttendanceRecord(user_id=5, timestamp=WORKDAY, latitude=12.9, longitude=77.6, role=Role.STUDENT)
    ]


def test_rejected_checkin_is_not_buffered():
    svc, _, buffer = _service()

    result = svc.mark(user_id=5, role="Student", latitude=12.9, longitude=77.6, now=NEW_YEAR)

    assert result.reason == RejectionReason.HOLIDAY_NO_EXTRA_CLASS
    assert len(buffer) == 0


def test_extra_class_added_at_runtime_applies_to_next_checkin():
    cal = AcademicCalendar(holidays=["2024-01-01"])
    svc, _, _ = _service(cal)

    assert not svc.mark(user_id=5, role="Student", latitude=12.9, longitude=77.6, now=NEW_YEAR).accepted
    cal.add_extra_class("2024-01-01")
    assert svc.mark(user_id=5, role="Student", latitude=12.9, longitude=77.6, now=NEW_YEAR).accepted


def test_string_identifier_is_resolved_to_number():
    svc, _, buffer = _service()

    result = svc.mark(user_id="TCH42", role="Teacher", latitude=0, longitude=0, now=NEW_YEAR)

    assert result.report.user_id == 42
    assert buffer.drain()[0].user_id == 42


@pytest.mark.parametrize("user_id", ["STU", "ABC12", "stu12", "12", "STU12x", 4.5, True])
def test_malformed_identifier_is_rejected(user_id):
    svc, _, buffer = _service()

    result = svc.mark(user_id=user_id, role="Student", latitude=0, longitude=0, now=WORKDAY)

    assert result.reason == RejectionReason.MALFORMED_IDENTIFIER
    assert len(buffer) == 0


def test_non_numeric_coordinates_raise_validation_error():
    svc, _, _ = _service()

    with pytest.raises(ValidationError):
        svc.mark(user_id=1, role="Student", latitude="north", longitude=0, now=WORKDAY)
    with pytest.raises(ValidationError):
        svc.mark(user_id=None, role="Student", latitude=0, longitude=0, now=WORKDAY)


def test_parse_user_id():
    assert parse_user_id(7) == 7
    assert parse_user_id("STU0012") == 12
    assert parse_user_id(" TCH3 ") == 3
    assert parse_user_id("TCH") is None


def test_flush_moves_buffer_into_store_in_order():
    svc, repo, _ = _service()
    for uid in (1, 2, 3):
        svc.mark(user_id=uid, role="Teacher", latitude=1, longitude=1, now=NEW_YEAR)

    assert svc.flush() == 3
    assert [r.user_id for r in repo.rows] == [1, 2, 3]
    assert svc.flush() == 0


def test_failed_flush_keeps_batch_for_retry():
    svc, repo, _ = _service()
    svc.mark(user_id=1, role="Teacher", latitude=1, longitude=1, now=NEW_YEAR)
    repo.fail_next = True

    with pytest.raises(ConnectionError):
        svc.flush()
    assert svc.pending_count == 1

    svc.mark(user_id=2, role="Teacher", latitude=1, longitude=1, now=NEW_YEAR)
    assert svc.flush() == 2
    assert [r.user_id for r in repo.rows] == [1, 2]
    assert svc.pending_count == 0


def test_list_records_includes_buffered_checkins():
    svc, _, _ = _service()
    svc.mark(user_id=1, role="Teacher", latitude=1, longitude=1, now=NEW_YEAR)

    assert [r.user_id for r in svc.list_records()] == [1]


def test_sync_enqueues_offline_records_without_policy():
    svc, repo, _ = _service()

    count = svc.sync(
        [
            {"userId": 5, "timestamp": "2024-01-01 08:00:00", "lat": 12.9, "lon": 77.6, "role": "Student"},
            {"userId": "TCH9", "timestamp": "2024-01-01 08:05:00", "lat": 12.9, "lon": 77.6, "role": "Teacher"},
        ]
    )
    svc.flush()

    assert count == 2
    assert [r.to_dict() for r in repo.rows] == [
        {"userId": 5, "timestamp": "2024-01-01 08:00:00", "lat": 12.9, "lon": 77.6, "role": "Student"},
        {"userId": 9, "timestamp": "2024-01-01 08:05:00", "lat": 12.9, "lon": 77.6, "role": "Teacher"},
    ]


@pytest.mark.parametrize(
    "item",
    [
        {"userId": 5, "timestamp": "2024-01-01", "lat": 1, "lon": 1, "role": "Student"},
        {"userId": 5, "timestamp": "2024-01-01 08:00:00", "lat": 1, "lon": 1, "role": "Janitor"},
        {"userId": "X5", "timestamp": "2024-01-01 08:00:00", "lat": 1, "lon": 1, "role": "Student"},
        {"userId": 5, "timestamp": "2024-01-01 08:00:00", "lat": None, "lon": 1, "role": "Student"},
        "not an object",
    ],
)
def test_sync_rejects_whole_batch_on_malformed_item(item):
    svc, _, buffer = _service()
    good = {"userId": 1, "timestamp": "2024-01-01 08:00:00", "lat": 1, "lon": 1, "role": "Teacher"}

    with pytest.raises(ValidationError):
        svc.sync([good, item])
    assert len(buffer) == 0
