from __future__ import annotations

import threading
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from ..academic_calendar.model import AcademicCalendar
from ..common.datetime_utils import now_local, parse_timestamp
from ..common.validators import is_valid_user_id, require_number
from ..core.enums import RejectionReason, Role
from ..core.exceptions import ValidationError
from .buffer import AttendanceBuffer
from .evaluation import evaluate
from .factory import AttendancePolicyFactory
from .model import AttendanceRecord, EvaluationResult
from .repository import AttendanceRepository


def parse_user_id(value: object) -> Optional[int]:
    """Numeric id from an int or a ``STU123``/``TCH45`` string; None if malformed."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and is_valid_user_id(value.strip()):
        return int(value.strip()[3:])
    return None


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        calendar: AcademicCalendar,
        buffer: AttendanceBuffer[AttendanceRecord] | None = None,
        *,
        policy_factory: AttendancePolicyFactory | None = None,
    ):
        self._attendance = attendance
        self._calendar = calendar
        self._buffer = buffer if buffer is not None else AttendanceBuffer()
        self._factory = policy_factory or AttendancePolicyFactory()
        # Batches the store refused; retried ahead of newer records.
        self._pending: List[AttendanceRecord] = []
        self._flush_lock = threading.Lock()

    @property
    def pending_count(self) -> int:
        return len(self._buffer) + len(self._pending)

    def mark(
        self,
        *,
        user_id: object,
        role: object,
        latitude: object,
        longitude: object,
        name: Optional[str] = None,
        now: datetime | None = None,
    ) -> EvaluationResult:
        if user_id is None:
            raise ValidationError("userId is required")
        lat = require_number(latitude, "lat")
        lon = require_number(longitude, "lon")

        numeric_id = parse_user_id(user_id)
        if numeric_id is None:
            return EvaluationResult.reject(RejectionReason.MALFORMED_IDENTIFIER)

        now = now or now_local()
        result = evaluate(role, lat, lon, self._calendar, now, user_id=numeric_id, name=name, factory=self._factory)
        if result.accepted:
            self._buffer.enqueue(
                AttendanceRecord(
                    user_id=numeric_id,
                    timestamp=now,
                    latitude=lat,
                    longitude=lon,
                    role=result.report.role,
                )
            )
        return result

    def sync(self, items: Iterable[dict]) -> int:
        """Queue check-ins recorded offline by a client.

        They were already accepted on the device, so no policy runs here; the
        whole batch is rejected if any item is malformed.
        """
        records = [self._parse_synced(i, item) for i, item in enumerate(items)]
        for record in records:
            self._buffer.enqueue(record)
        return len(records)

    def _parse_synced(self, index: int, item: object) -> AttendanceRecord:
        if not isinstance(item, dict):
            raise ValidationError(f"item {index}: expected an object")

        user_id = parse_user_id(item.get("userId"))
        if user_id is None:
            raise ValidationError(f"item {index}: malformed userId")

        role = Role.parse(item.get("role"))
        if role is None:
            raise ValidationError(f"item {index}: unknown role")

        try:
            timestamp = parse_timestamp(str(item.get("timestamp", "")))
        except ValueError:
            raise ValidationError(f"item {index}: timestamp must be YYYY-MM-DD HH:MM:SS") from None

        return AttendanceRecord(
            user_id=user_id,
            timestamp=timestamp,
            latitude=require_number(item.get("lat"), f"item {index}: lat"),
            longitude=require_number(item.get("lon"), f"item {index}: lon"),
            role=role,
        )

    def flush(self) -> int:
        """Move everything buffered into the store.

        If the store fails the batch is kept and retried first on the next flush,
        then the error propagates.
        """
        with self._flush_lock:
            batch = self._pending + self._buffer.drain()
            self._pending = []
            if not batch:
                return 0
            try:
                return self._attendance.insert_many(batch)
            except Exception:
                self._pending = batch
                raise

    def list_records(self) -> Sequence[AttendanceRecord]:
        self.flush()
        return self._attendance.list_all()
