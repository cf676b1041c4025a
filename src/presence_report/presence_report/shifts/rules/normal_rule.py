from __future__ import annotations

from typing import Optional

from ...core.enums import ShiftStatus
from .base import ShiftMetrics, StatusDecision, StatusRule


class NormalRule(StatusRule):
    def decide(self, metrics: ShiftMetrics) -> Optional[StatusDecision]:
        return StatusDecision(ShiftStatus.NORMAL, "✅")
