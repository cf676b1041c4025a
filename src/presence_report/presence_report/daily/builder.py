from __future__ import annotations

from datetime import date
from typing import Iterable, List, Sequence

from ..common.datetime_utils import minutes_between
from ..common.formatting import day_label, format_hhmm, format_minutes, weekday_pt
from ..common.grouping import iter_day_buckets
from ..common.validators import require_date_range
from ..core.constants import DEFAULT_AWAY_REASON
from ..core.enums import EmptyDayPolicy, PresenceStatus
from ..events.model import AttendanceEvent
from .model import DailyRow


def build_daily_row(day: date, day_events: Sequence[AttendanceEvent]) -> DailyRow:
    """Row of one day from its sorted events, walking raw pairs directly."""

    if not day_events:
        return DailyRow(date=day, weekday=weekday_pt(day), label=day_label(day))

    present = 0.0
    away = 0.0
    reasons: List[str] = []
    away_events: List[str] = []

    for i, current in enumerate(day_events):
        duration = None
        if i + 1 < len(day_events):
            duration = minutes_between(current.timestamp, day_events[i + 1].timestamp)
            if current.away:
                away += duration
            else:
                present += duration

        if current.away:
            reason = current.away_reason or DEFAULT_AWAY_REASON
            if reason not in reasons:
                reasons.append(reason)
            label = f"{format_hhmm(current.timestamp)} {reason}"
            if duration is not None:
                label += f" ({format_minutes(duration)})"
            away_events.append(label)

    last = day_events[-1]
    return DailyRow(
        date=day,
        weekday=weekday_pt(day),
        label=day_label(day),
        total_present_minutes=present,
        total_away_minutes=away,
        first_event_time=format_hhmm(day_events[0].timestamp),
        last_event_time=format_hhmm(last.timestamp),
        current_status=PresenceStatus.AWAY if last.away else PresenceStatus.ONLINE,
        reasons=tuple(reasons),
        away_events=tuple(away_events),
    )


def build_daily_rows(
    events: Iterable[AttendanceEvent],
    start: date,
    end: date,
) -> List[DailyRow]:
    """One row per date of ``[start, end]``, even for days without events.

    ``events`` are expected to belong to a single attendant; events outside
    the range are ignored.
    """

    require_date_range(start, end)
    buckets = iter_day_buckets(list(events), policy=EmptyDayPolicy.PLACEHOLDER, start=start, end=end)
    return [build_daily_row(day, day_events) for day, day_events in buckets]
