from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.presence_report.presence_report.core.enums import PresenceStatus, TimelineEventType
from src.presence_report.presence_report.events.model import AttendanceEvent
from src.presence_report.presence_report.summary.engine import compact_same_minute, summarize_attendance


def ev(hhmmss: str, away: bool = False, reason=None, *, user: str = "1", day: str = "2026-01-06") -> AttendanceEvent:
    ts = datetime.fromisoformat(f"{day}T{hhmmss}").replace(tzinfo=timezone.utc)
    return AttendanceEvent(
        id_user=user,
        name=f"User {user}",
        email=f"u{user}@example.com",
        timestamp=ts,
        away=away,
        away_reason=reason,
    )


def test_empty_input_gives_empty_result():
    assert summarize_attendance([]) == []


def test_single_event_has_zero_totals_and_full_availability():
    [summary] = summarize_attendance([ev("14:00:00")])

    assert summary.total_present_minutes == 0
    assert summary.total_away_minutes == 0
    assert summary.availability_percent == 100
    assert len(summary.timeline) == 1
    assert summary.timeline[0].duration_minutes is None
    assert summary.current_status == PresenceStatus.ONLINE


def test_totals_and_timeline_from_unordered_input():
    events = [
        ev("10:00:00"),
        ev("09:00:00"),
        ev("09:30:00", away=True, reason="lunch"),
        ev("10:30:00", away=True, reason="break"),
    ]

    [summary] = summarize_attendance(events)

    assert summary.total_present_minutes == pytest.approx(60)
    assert summary.total_away_minutes == pytest.approx(30)
    assert summary.availability_percent == 67
    assert summary.current_status == PresenceStatus.AWAY
    assert summary.current_reason == "break"
    assert [t.type for t in summary.timeline] == [
        TimelineEventType.ENTRY,
        TimelineEventType.EXIT,
        TimelineEventType.ENTRY,
        TimelineEventType.EXIT,
    ]
    assert [t.duration_minutes for t in summary.timeline] == [30, 30, 30, None]
    assert summary.timeline[1].reason == "lunch"


def test_totals_cover_elapsed_time_between_first_and_last_event():
    events = [
        ev("08:01:10"),
        ev("08:47:35", away=True),
        ev("09:12:05"),
        ev("11:59:59", away=True),
        ev("13:00:00"),
    ]

    [summary] = summarize_attendance(events)

    elapsed = (events[-1].timestamp - events[0].timestamp).total_seconds() / 60
    assert summary.total_present_minutes + summary.total_away_minutes == pytest.approx(elapsed)


def test_same_minute_events_keep_the_later_one():
    events = [
        ev("09:00:10"),
        ev("09:00:50", away=True, reason="x"),
        ev("09:30:00"),
    ]

    compacted = compact_same_minute(events)
    assert compacted == [events[1], events[2]]

    [summary] = summarize_attendance(events)
    assert summary.total_present_minutes == 0
    assert summary.total_away_minutes == pytest.approx(29 + 10 / 60)
    assert summary.availability_percent == 0
    assert len(summary.timeline) == 2


def test_equal_timestamps_keep_input_order():
    first = ev("09:00:00", away=True, reason="first")
    second = ev("09:00:00", away=False)

    [summary] = summarize_attendance([first, second])

    assert summary.current_status == PresenceStatus.ONLINE
    assert summary.current_reason is None


def test_one_summary_per_user_in_first_appearance_order():
    events = [
        ev("09:00:00", user="b"),
        ev("09:00:00", user="a"),
        ev("10:00:00", user="b", away=True),
        ev("09:45:00", user="a", away=True),
    ]

    summaries = summarize_attendance(events)

    assert [s.id_user for s in summaries] == ["b", "a"]
    assert summaries[0].total_present_minutes == pytest.approx(60)
    assert summaries[1].total_present_minutes == pytest.approx(45)


def test_running_twice_gives_identical_output():
    events = [ev("09:00:00"), ev("09:20:00", away=True, reason="café"), ev("09:35:00")]

    assert summarize_attendance(events) == summarize_attendance(events)
