from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def insert_many(self, records: Sequence[AttendanceRecord]) -> int:
        """Persist records in order; returns how many rows were written.

        No uniqueness constraint: inserting the same record twice stores it twice.
        """

        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
