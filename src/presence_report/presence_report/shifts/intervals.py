from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import List, Sequence

from ..common.datetime_utils import minute_of_day, minutes_between
from ..events.model import AttendanceEvent


@dataclass(frozen=True)
class Interval:
    """A maximal run of consecutive same-state events of one day."""

    start: datetime
    end: datetime
    away: bool
    present_minutes: float = 0.0
    away_minutes: float = 0.0

    @property
    def start_minute(self) -> float:
        return minute_of_day(self.start)

    @property
    def end_minute(self) -> float:
        return minute_of_day(self.end)


def build_merged_intervals(day_events: Sequence[AttendanceEvent]) -> List[Interval]:
    """Merge consecutive pairs of sorted events into present/away blocks.

    A pair ``(current, next)`` extends the open interval when the previous
    event had the same state as ``current``; otherwise it opens a new one.
    Repeated no-op pings of the same state collapse into one block. The last
    event only closes an interval, it never opens one.
    """

    intervals: List[Interval] = []
    for i in range(len(day_events) - 1):
        current = day_events[i]
        nxt = day_events[i + 1]
        duration = minutes_between(current.timestamp, nxt.timestamp)
        present = 0.0 if current.away else duration
        away = duration if current.away else 0.0

        if intervals and day_events[i - 1].away == current.away:
            last = intervals[-1]
            intervals[-1] = replace(
                last,
                end=nxt.timestamp,
                present_minutes=last.present_minutes + present,
                away_minutes=last.away_minutes + away,
            )
        else:
            intervals.append(
                Interval(
                    start=current.timestamp,
                    end=nxt.timestamp,
                    away=current.away,
                    present_minutes=present,
                    away_minutes=away,
                )
            )
    return intervals
