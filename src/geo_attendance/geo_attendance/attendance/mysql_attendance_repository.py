from __future__ import annotations

from typing import Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert_many(self, records: Sequence[AttendanceRecord]) -> int:
        if not records:
            return 0

        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO attendance(user_id, recorded_at, latitude, longitude, role)
                VALUES(%s,%s,%s,%s,%s)
                """,
                [(r.user_id, r.timestamp, r.latitude, r.longitude, r.role.value) for r in records],
            )
            return len(records)

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, recorded_at, latitude, longitude, role
                FROM attendance
                ORDER BY attendance_id ASC
                """
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    user_id=int(r["user_id"]),
                    timestamp=r["recorded_at"],
                    latitude=float(r["latitude"]),
                    longitude=float(r["longitude"]),
                    role=Role(r["role"]),
                )
                for r in rows
            ]
