from __future__ import annotations

from typing import Optional

from ...core.constants import SUSPICIOUS_MAX_MINUTES
from ...core.enums import ShiftStatus
from .base import ShiftMetrics, StatusDecision, StatusRule


class SuspiciousRule(StatusRule):
    """Too short to be a real shift."""

    def __init__(self, max_minutes: int = SUSPICIOUS_MAX_MINUTES):
        self._max_minutes = int(max_minutes)

    def decide(self, metrics: ShiftMetrics) -> Optional[StatusDecision]:
        if metrics.total_minutes < self._max_minutes:
            return StatusDecision(ShiftStatus.SUSPICIOUS, "⚠️ Suspeito")
        return None
