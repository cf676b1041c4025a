from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Sequence

from ..common.validators import require_date_range, require_non_empty
from ..daily.builder import build_daily_rows
from ..daily.model import DailyRow
from ..events.model import Attendant
from ..events.repository import AttendanceEventRepository
from ..shifts.engine import ShiftAggregator
from ..shifts.model import DEFAULT_SHIFT_TABLE, DailySummary, ShiftTable
from ..summary.engine import summarize_attendance
from ..summary.model import AttendanceSummary

logger = logging.getLogger(__name__)


class AttendanceReportService:
    """Fetches events from the source and runs them through the engines.

    Errors raised by the repository (connection, query, ...) are not caught
    here: callers receive them unchanged.
    """

    def __init__(
        self,
        events: AttendanceEventRepository,
        *,
        shift_table: ShiftTable = DEFAULT_SHIFT_TABLE,
        aggregator: Optional[ShiftAggregator] = None,
    ):
        self._events = events
        self._aggregator = aggregator or ShiftAggregator(shift_table)

    def overview(self, *, start: date, end: date) -> List[AttendanceSummary]:
        require_date_range(start, end)
        events = self._events.list_by_date_range(start, end)
        logger.info("overview %s..%s: %d events", start, end, len(events))
        return summarize_attendance(events)

    def shift_report(self, *, start: date, end: date, user_id: Optional[str] = None) -> List[DailySummary]:
        require_date_range(start, end)
        if user_id:
            events = self._events.list_by_user(str(user_id), start, end)
        else:
            events = self._events.list_by_date_range(start, end)
        summaries = self._aggregator.aggregate(events)
        logger.info("shift report %s..%s user=%s: %d events, %d days", start, end, user_id, len(events), len(summaries))
        return summaries

    def daily_rows(self, *, user_id: str, start: date, end: date) -> List[DailyRow]:
        user_id = require_non_empty(str(user_id or ""), "user_id")
        require_date_range(start, end)
        events = self._events.list_by_user(user_id, start, end)
        logger.debug("daily rows user=%s: %d events", user_id, len(events))
        return build_daily_rows(events, start, end)

    def attendants(self, *, start: Optional[date] = None, end: Optional[date] = None) -> Sequence[Attendant]:
        if start and end:
            require_date_range(start, end)
        return self._events.list_attendants(start, end)

    def search_by_name(
        self,
        name: str,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[AttendanceSummary]:
        name = require_non_empty(name, "name")
        if start and end:
            require_date_range(start, end)
        return summarize_attendance(self._events.list_by_name(name, start, end))

    def current_status(self) -> List[AttendanceSummary]:
        """Status of every attendant according to their latest event."""
        return summarize_attendance(self._events.list_latest_per_user())
