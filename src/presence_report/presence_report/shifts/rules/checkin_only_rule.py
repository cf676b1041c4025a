from __future__ import annotations

from typing import Optional

from ...core.enums import ShiftStatus
from .base import ShiftMetrics, StatusDecision, StatusRule


class CheckinOnlyRule(StatusRule):
    """No measurable minutes: the attendant only checked in."""

    def decide(self, metrics: ShiftMetrics) -> Optional[StatusDecision]:
        if metrics.total_minutes == 0:
            return StatusDecision(ShiftStatus.CHECKIN_ONLY, "🔄 Check-in")
        return None
