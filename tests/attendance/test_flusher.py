from __future__ import annotations

import logging
import time
from datetime import datetime

import pytest

from src.geo_attendance.geo_attendance.academic_calendar.model import AcademicCalendar
from src.geo_attendance.geo_attendance.attendance.flusher import BufferFlusher
from src.geo_attendance.geo_attendance.attendance.service import AttendanceService


class InMemoryAttendance:
    def __init__(self, *, broken: bool = False):
        self.rows = []
        self.broken = broken

    def insert_many(self, records):
        if self.broken:
            raise ConnectionError("store down")
        self.rows.extend(records)
        return len(records)

    def list_all(self):
        return list(self.rows)


NOW = datetime(2024, 1, 2, 9, 0, 0)


def _wait_for(predicate, timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


def test_background_flusher_moves_records_to_store():
    repo = InMemoryAttendance()
    svc = AttendanceService(repo, AcademicCalendar())
    flusher = BufferFlusher(svc, interval_seconds=0.01)
    flusher.start()
    try:
        svc.mark(user_id=1, role="Teacher", latitude=0, longitude=0, now=NOW)
        assert _wait_for(lambda: len(repo.rows) == 1)
    finally:
        flusher.stop(timeout=2)

    assert not flusher.running


def test_stop_flushes_remaining_records():
    repo = InMemoryAttendance()
    svc = AttendanceService(repo, AcademicCalendar())
    flusher = BufferFlusher(svc, interval_seconds=60)
    flusher.start()

    svc.mark(user_id=1, role="Student", latitude=0, longitude=0, now=NOW)
    flusher.stop(timeout=2)

    assert [r.user_id for r in repo.rows] == [1]


def test_store_failure_is_logged_and_batch_kept(caplog):
    repo = InMemoryAttendance(broken=True)
    svc = AttendanceService(repo, AcademicCalendar())
    flusher = BufferFlusher(svc, interval_seconds=60)
    svc.mark(user_id=1, role="Student", latitude=0, longitude=0, now=NOW)

    with caplog.at_level(logging.ERROR):
        assert flusher.flush_once() == 0

    assert "Flushing attendance buffer failed" in caplog.text
    assert svc.pending_count == 1

    repo.broken = False
    assert flusher.flush_once() == 1
    assert svc.pending_count == 0


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        BufferFlusher(AttendanceService(InMemoryAttendance(), AcademicCalendar()), interval_seconds=0)
