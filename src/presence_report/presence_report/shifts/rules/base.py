from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import ShiftStatus
from ..model import ShiftWindow


@dataclass(frozen=True)
class StatusDecision:
    status: ShiftStatus
    label: str


@dataclass(frozen=True)
class ShiftMetrics:
    """What the rules look at: accumulated minutes and the exit clock minute."""

    present_minutes: int
    away_minutes: int
    window: ShiftWindow
    exit_minute: int

    @property
    def total_minutes(self) -> int:
        return self.present_minutes + self.away_minutes

    @property
    def availability(self) -> float:
        total = self.total_minutes
        return self.present_minutes / total * 100 if total > 0 else 0.0


class StatusRule(ABC):
    """Strategy Pattern: one check of the shift classification chain."""

    @abstractmethod
    def decide(self, metrics: ShiftMetrics) -> Optional[StatusDecision]:
        """Return a decision when the rule matches, else None."""
        raise NotImplementedError
