from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import Role
from .policies.base import AttendancePolicy
from .policies.student_policy import StudentPolicy
from .policies.teacher_policy import TeacherPolicy


def _default_policies() -> dict[Role, AttendancePolicy]:
    return {Role.STUDENT: StudentPolicy(), Role.TEACHER: TeacherPolicy()}


@dataclass
class AttendancePolicyFactory:
    """Factory Pattern: pick the policy for a role tag."""

    policies: dict[Role, AttendancePolicy] = field(default_factory=_default_policies)

    def for_role(self, role: object) -> Optional[AttendancePolicy]:
        parsed = Role.parse(role)
        if parsed is None:
            return None
        return self.policies.get(parsed)
