from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..common.formatting import percent
from .model import ShiftRecord


@dataclass(frozen=True)
class DailyTotals:
    total_present_minutes: int
    total_away_minutes: int
    total_availability_percent: int


def rollup_day(records: Iterable[ShiftRecord]) -> DailyTotals:
    """Sum one day's shift records into daily totals."""

    present = 0
    away = 0
    for r in records:
        present += r.present_minutes
        away += r.away_minutes
    return DailyTotals(
        total_present_minutes=present,
        total_away_minutes=away,
        total_availability_percent=percent(present, present + away, empty=0),
    )
