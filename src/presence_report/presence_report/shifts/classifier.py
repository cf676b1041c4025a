from __future__ import annotations

from dataclasses import dataclass, field

from .model import ShiftWindow
from .rules.base import ShiftMetrics, StatusDecision, StatusRule
from .rules.checkin_only_rule import CheckinOnlyRule
from .rules.high_absence_rule import HighAbsenceRule
from .rules.normal_rule import NormalRule
from .rules.overtime_rule import OvertimeRule
from .rules.suspicious_rule import SuspiciousRule


def default_rules() -> tuple[StatusRule, ...]:
    return (
        CheckinOnlyRule(),
        SuspiciousRule(),
        HighAbsenceRule(),
        OvertimeRule(),
        NormalRule(),
    )


@dataclass(frozen=True)
class ShiftStatusClassifier:
    """Chain of Responsibility over status rules: first match wins."""

    rules: tuple[StatusRule, ...] = field(default_factory=default_rules)

    def classify(
        self,
        *,
        present_minutes: int,
        away_minutes: int,
        window: ShiftWindow,
        exit_minute: int,
    ) -> StatusDecision:
        metrics = ShiftMetrics(
            present_minutes=present_minutes,
            away_minutes=away_minutes,
            window=window,
            exit_minute=exit_minute,
        )
        for rule in self.rules:
            decision = rule.decide(metrics)
            if decision is not None:
                return decision
        raise LookupError("No status rule matched; the chain must end with a catch-all rule")
