"""Grouping helpers shared by the aggregation engines.

All ordering here is stable: events with equal timestamps keep the order in
which the source supplied them.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..core.enums import EmptyDayPolicy
from ..core.exceptions import ValidationError
from ..events.model import AttendanceEvent
from .datetime_utils import iter_dates


def sort_events(events: Iterable[AttendanceEvent]) -> List[AttendanceEvent]:
    return sorted(events, key=lambda e: e.timestamp)


def group_by_user(events: Iterable[AttendanceEvent]) -> Dict[str, List[AttendanceEvent]]:
    """Bucket events by ``id_user`` in first-appearance order."""
    groups: Dict[str, List[AttendanceEvent]] = {}
    for event in events:
        groups.setdefault(event.id_user, []).append(event)
    return groups


def iter_day_buckets(
    events: Sequence[AttendanceEvent],
    *,
    policy: EmptyDayPolicy,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> Iterator[Tuple[date, List[AttendanceEvent]]]:
    """Yield ``(day, sorted events of that day)`` in date order.

    ``SKIP`` yields only days that have events (``start``/``end`` narrow the
    range when given). ``PLACEHOLDER`` yields every date of ``[start, end]``,
    with an empty list for days without events, and requires both bounds.
    """

    by_day: Dict[date, List[AttendanceEvent]] = {}
    for event in events:
        by_day.setdefault(event.day, []).append(event)

    if policy == EmptyDayPolicy.PLACEHOLDER:
        if start is None or end is None:
            raise ValidationError("start and end are required for placeholder days")
        days: Iterable[date] = iter_dates(start, end)
    else:
        days = (
            d
            for d in sorted(by_day)
            if (start is None or d >= start) and (end is None or d <= end)
        )

    for day in days:
        yield day, sort_events(by_day.get(day, []))
