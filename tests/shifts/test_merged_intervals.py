from __future__ import annotations

from datetime import datetime, timezone

from src.presence_report.presence_report.events.model import AttendanceEvent
from src.presence_report.presence_report.shifts.intervals import build_merged_intervals


def ev(hhmm: str, away: bool = False) -> AttendanceEvent:
    ts = datetime.fromisoformat(f"2026-01-06T{hhmm}:00").replace(tzinfo=timezone.utc)
    return AttendanceEvent(id_user="1", name="A", email="a@example.com", timestamp=ts, away=away)


def test_consecutive_same_state_pings_are_merged():
    events = [ev("09:00"), ev("09:10"), ev("09:20", away=True), ev("09:30", away=True), ev("09:40")]

    intervals = build_merged_intervals(events)

    assert len(intervals) == 2
    present, away = intervals
    assert (present.start, present.end, present.away) == (events[0].timestamp, events[2].timestamp, False)
    assert present.present_minutes == 20
    assert present.away_minutes == 0
    assert (away.start, away.end, away.away) == (events[2].timestamp, events[4].timestamp, True)
    assert away.away_minutes == 20


def test_alternating_states_open_new_intervals():
    events = [ev("09:00"), ev("09:30", away=True), ev("10:00"), ev("10:30", away=True)]

    intervals = build_merged_intervals(events)

    assert [i.away for i in intervals] == [False, True, False]
    assert [i.start_minute for i in intervals] == [540, 570, 600]
    assert [i.end_minute for i in intervals] == [570, 600, 630]


def test_single_event_has_no_intervals():
    assert build_merged_intervals([ev("14:00")]) == []
    assert build_merged_intervals([]) == []
