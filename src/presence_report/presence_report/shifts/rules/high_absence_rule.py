from __future__ import annotations

from typing import Optional

from ...core.constants import HIGH_ABSENCE_BELOW_PERCENT
from ...core.enums import ShiftStatus
from .base import ShiftMetrics, StatusDecision, StatusRule


class HighAbsenceRule(StatusRule):
    def __init__(self, below_percent: float = HIGH_ABSENCE_BELOW_PERCENT):
        self._below_percent = float(below_percent)

    def decide(self, metrics: ShiftMetrics) -> Optional[StatusDecision]:
        # Compared on the unrounded ratio.
        if metrics.availability < self._below_percent:
            return StatusDecision(ShiftStatus.HIGH_ABSENCE, "❌ Alta ausência")
        return None
