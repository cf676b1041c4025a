from __future__ import annotations

import pytest

from src.presence_report.presence_report.core.enums import ShiftStatus
from src.presence_report.presence_report.shifts.classifier import ShiftStatusClassifier
from src.presence_report.presence_report.shifts.model import DEFAULT_SHIFT_TABLE
from src.presence_report.presence_report.shifts.rules.normal_rule import NormalRule
from src.presence_report.presence_report.shifts.rules.suspicious_rule import SuspiciousRule

TARDE = DEFAULT_SHIFT_TABLE.get("Tarde")


@pytest.mark.parametrize(
    "present,away,exit_minute,expected",
    [
        (0, 0, 1200, ShiftStatus.CHECKIN_ONLY),
        (3, 0, 1200, ShiftStatus.SUSPICIOUS),
        (0, 4, 900, ShiftStatus.SUSPICIOUS),
        (10, 30, 1200, ShiftStatus.HIGH_ABSENCE),
        (60, 30, 1110, ShiftStatus.OVERTIME),
        (60, 30, 1080, ShiftStatus.NORMAL),
        (30, 30, 900, ShiftStatus.NORMAL),
    ],
)
def test_first_matching_rule_wins(present, away, exit_minute, expected):
    decision = ShiftStatusClassifier().classify(
        present_minutes=present,
        away_minutes=away,
        window=TARDE,
        exit_minute=exit_minute,
    )

    assert decision.status == expected


def test_labels():
    classifier = ShiftStatusClassifier()
    labels = {}
    for present, away, exit_minute in [(0, 0, 900), (2, 0, 900), (1, 9, 900), (50, 0, 1100), (50, 0, 900)]:
        decision = classifier.classify(
            present_minutes=present, away_minutes=away, window=TARDE, exit_minute=exit_minute
        )
        labels[decision.status] = decision.label

    assert labels == {
        ShiftStatus.CHECKIN_ONLY: "🔄 Check-in",
        ShiftStatus.SUSPICIOUS: "⚠️ Suspeito",
        ShiftStatus.HIGH_ABSENCE: "❌ Alta ausência",
        ShiftStatus.OVERTIME: "+HE",
        ShiftStatus.NORMAL: "✅",
    }


def test_custom_rule_chain():
    classifier = ShiftStatusClassifier(rules=(SuspiciousRule(max_minutes=30), NormalRule()))

    decision = classifier.classify(present_minutes=20, away_minutes=0, window=TARDE, exit_minute=900)

    assert decision.status == ShiftStatus.SUSPICIOUS


def test_chain_without_catch_all_raises():
    classifier = ShiftStatusClassifier(rules=(SuspiciousRule(),))

    with pytest.raises(LookupError):
        classifier.classify(present_minutes=20, away_minutes=0, window=TARDE, exit_minute=900)
