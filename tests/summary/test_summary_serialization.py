from __future__ import annotations

from datetime import datetime, timezone

from src.presence_report.presence_report.events.model import AttendanceEvent
from src.presence_report.presence_report.summary.engine import summarize_attendance


def test_summary_to_dict_formats_durations_and_timestamps():
    events = [
        AttendanceEvent("7", "Ana", "ana@example.com", datetime(2026, 1, 6, 8, 0, tzinfo=timezone.utc), False),
        AttendanceEvent("7", "Ana", "ana@example.com", datetime(2026, 1, 6, 15, 5, tzinfo=timezone.utc), True, "Almoço"),
    ]

    data = summarize_attendance(events)[0].to_dict()

    assert data["total_present_formatted"] == "7h 5m"
    assert data["total_away_formatted"] == "0m"
    assert data["current_status"] == "away"
    assert data["timeline"][0] == {
        "timestamp": "2026-01-06T08:00:00Z",
        "type": "entry",
        "reason": None,
        "duration_minutes": 425.0,
    }
    assert data["timeline"][1]["duration_minutes"] is None
