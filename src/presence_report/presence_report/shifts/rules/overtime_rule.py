from __future__ import annotations

from typing import Optional

from ...core.enums import ShiftStatus
from .base import ShiftMetrics, StatusDecision, StatusRule


class OvertimeRule(StatusRule):
    """Exit recorded after the shift's overtime limit."""

    def decide(self, metrics: ShiftMetrics) -> Optional[StatusDecision]:
        if metrics.exit_minute > metrics.window.overtime_limit:
            return StatusDecision(ShiftStatus.OVERTIME, "+HE")
        return None
