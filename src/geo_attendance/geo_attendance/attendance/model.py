from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_timestamp
from ..core.enums import RejectionReason, Role


@dataclass(frozen=True)
class AttendanceRecord:
    """Accepted check-in, immutable once the policy has accepted it."""

    user_id: int
    timestamp: datetime
    latitude: float
    longitude: float
    role: Role

    def to_dict(self) -> dict:
        return {
            "userId": self.user_id,
            "timestamp": format_timestamp(self.timestamp),
            "lat": self.latitude,
            "lon": self.longitude,
            "role": self.role.value,
        }


@dataclass(frozen=True)
class AttendanceReport:
    """Per-submission summary returned to the caller. Derived, never stored."""

    user_id: int
    role: Role
    name: Optional[str] = None

    @property
    def title(self) -> str:
        return f"{self.role.value} Report"

    def to_dict(self) -> dict:
        data: dict = {"id": self.user_id}
        if self.name is not None:
            data["name"] = self.name
        data["role"] = self.role.value
        data["type"] = self.title
        return data


@dataclass(frozen=True)
class EvaluationResult:
    accepted: bool
    report: Optional[AttendanceReport] = None
    reason: Optional[RejectionReason] = None

    @classmethod
    def accept(cls, report: AttendanceReport) -> "EvaluationResult":
        return cls(accepted=True, report=report)

    @classmethod
    def reject(cls, reason: RejectionReason) -> "EvaluationResult":
        return cls(accepted=False, reason=reason)

    def to_dict(self) -> dict:
        if self.accepted:
            return {"accepted": True, "report": self.report.to_dict()}
        return {"accepted": False, "reason": self.reason.value}
