from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from ..common.datetime_utils import minutes_between
from ..common.formatting import percent
from ..common.grouping import group_by_user, sort_events
from ..core.constants import MINUTE_KEY_FORMAT
from ..core.enums import PresenceStatus, TimelineEventType
from ..events.model import AttendanceEvent
from .model import AttendanceSummary, TimelineEntry

logger = logging.getLogger(__name__)


def compact_same_minute(events: Sequence[AttendanceEvent]) -> List[AttendanceEvent]:
    """Keep only the last of consecutive events sharing a minute.

    ``events`` must already be sorted. Rapid flapping inside one minute
    collapses to the state the attendant ended that minute in.
    """

    compacted: List[AttendanceEvent] = []
    for event in events:
        key = event.timestamp.strftime(MINUTE_KEY_FORMAT)
        if compacted and compacted[-1].timestamp.strftime(MINUTE_KEY_FORMAT) == key:
            compacted[-1] = event
        else:
            compacted.append(event)
    return compacted


def summarize_user(user_events: Sequence[AttendanceEvent]) -> AttendanceSummary:
    """Build the summary of one attendant's (non-empty) event list."""

    first = user_events[0]
    compacted = compact_same_minute(sort_events(user_events))

    total_present = 0.0
    total_away = 0.0
    timeline: List[TimelineEntry] = []

    for i, current in enumerate(compacted):
        duration = None
        if i + 1 < len(compacted):
            duration = minutes_between(current.timestamp, compacted[i + 1].timestamp)
            if current.away:
                total_away += duration
            else:
                total_present += duration

        timeline.append(
            TimelineEntry(
                timestamp=current.timestamp,
                type=TimelineEventType.EXIT if current.away else TimelineEventType.ENTRY,
                reason=current.away_reason,
                duration_minutes=duration,
            )
        )

    last = compacted[-1]
    return AttendanceSummary(
        id_user=first.id_user,
        name=first.name,
        email=first.email,
        total_present_minutes=total_present,
        total_away_minutes=total_away,
        current_status=PresenceStatus.AWAY if last.away else PresenceStatus.ONLINE,
        current_reason=last.away_reason or None,
        availability_percent=percent(total_present, total_present + total_away, empty=100),
        timeline=tuple(timeline),
    )


def summarize_attendance(events: Iterable[AttendanceEvent]) -> List[AttendanceSummary]:
    """One ``AttendanceSummary`` per distinct attendant, in first-appearance order."""

    groups = group_by_user(events)
    summaries = [summarize_user(user_events) for user_events in groups.values()]
    logger.debug("summarized %d attendants", len(summaries))
    return summaries
