from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence

from ..common.datetime_utils import clock_minute
from ..common.formatting import percent, round_half_up
from ..common.grouping import group_by_user, iter_day_buckets
from ..core.enums import EmptyDayPolicy
from ..events.model import AttendanceEvent
from .classifier import ShiftStatusClassifier
from .intervals import Interval, build_merged_intervals
from .model import DEFAULT_SHIFT_TABLE, DailySummary, ShiftRecord, ShiftTable, ShiftWindow
from .rollup import rollup_day

logger = logging.getLogger(__name__)


class ShiftAggregator:
    """Splits each attendant's day into shift records.

    Stateless: every call works on its own input and returns fresh objects,
    so one instance can be shared between report views.
    """

    def __init__(
        self,
        shift_table: ShiftTable = DEFAULT_SHIFT_TABLE,
        *,
        classifier: Optional[ShiftStatusClassifier] = None,
    ):
        self._table = shift_table
        self._classifier = classifier or ShiftStatusClassifier()

    def aggregate(self, events: Iterable[AttendanceEvent]) -> List[DailySummary]:
        summaries: List[DailySummary] = []
        for user_events in group_by_user(events).values():
            for day, day_events in iter_day_buckets(user_events, policy=EmptyDayPolicy.SKIP):
                summary = self.summarize_day(day, day_events)
                if summary is not None:
                    summaries.append(summary)

        summaries.sort(key=lambda s: s.date)
        logger.debug("aggregated %d user-days", len(summaries))
        return summaries

    def summarize_day(self, day: date, day_events: Sequence[AttendanceEvent]) -> Optional[DailySummary]:
        """Summary of one attendant's sorted events of ``day``; None without pairs."""

        intervals = build_merged_intervals(day_events)
        if not intervals:
            return None

        first = day_events[0]
        records: List[ShiftRecord] = []
        for window in self._table:
            record = self._shift_record(day, day_events, intervals, window)
            if record is not None:
                records.append(record)

        totals = rollup_day(records)
        return DailySummary(
            id_user=first.id_user,
            name=first.name,
            email=first.email,
            date=day,
            shifts=tuple(records),
            total_present_minutes=totals.total_present_minutes,
            total_away_minutes=totals.total_away_minutes,
            total_availability_percent=totals.total_availability_percent,
        )

    def _shift_record(
        self,
        day: date,
        day_events: Sequence[AttendanceEvent],
        intervals: Sequence[Interval],
        window: ShiftWindow,
    ) -> Optional[ShiftRecord]:
        present = 0.0
        away = 0.0
        last_overlapping: Optional[Interval] = None
        for interval in intervals:
            overlap = window.overlap_minutes(interval.start_minute, interval.end_minute)
            if overlap <= 0:
                continue
            last_overlapping = interval
            if interval.away:
                away += overlap
            else:
                present += overlap

        if last_overlapping is None:
            return None

        present_minutes = round_half_up(present)
        away_minutes = round_half_up(away)

        inside = [e for e in day_events if window.contains_minute(clock_minute(e.timestamp))]
        entry = inside[0].timestamp if inside else window.start_at(day)
        exit_ = self._exit_timestamp(day, window, inside, last_overlapping)

        decision = self._classifier.classify(
            present_minutes=present_minutes,
            away_minutes=away_minutes,
            window=window,
            exit_minute=clock_minute(exit_),
        )
        first = day_events[0]
        return ShiftRecord(
            id_user=first.id_user,
            name=first.name,
            email=first.email,
            date=day,
            shift=window.name,
            shift_icon=window.icon,
            entry_timestamp=entry,
            exit_timestamp=exit_,
            present_minutes=present_minutes,
            away_minutes=away_minutes,
            availability_percent=percent(present_minutes, present_minutes + away_minutes, empty=0),
            status=decision.status,
            status_label=decision.label,
        )

    @staticmethod
    def _exit_timestamp(
        day: date,
        window: ShiftWindow,
        inside: Sequence[AttendanceEvent],
        last_overlapping: Interval,
    ) -> datetime:
        """Last event inside the window, or the window end when there is none.

        When the attendant was still present as the window closed, the event
        that ended that presence is the exit, even if it lies past the window.
        """

        exit_ = inside[-1].timestamp if inside else window.end_at(day)
        if not last_overlapping.away and clock_minute(last_overlapping.end) > window.end_minute:
            exit_ = max(exit_, last_overlapping.end)
        return exit_


def aggregate_shifts(
    events: Iterable[AttendanceEvent],
    shift_table: ShiftTable = DEFAULT_SHIFT_TABLE,
) -> List[DailySummary]:
    """One ``DailySummary`` per (attendant, UTC day) with at least one event pair."""
    return ShiftAggregator(shift_table).aggregate(events)

