"""Example: run the engines on in-memory rows (no database, no Flask).

Controllers are a thin layer; all the aggregation lives in pure functions.
"""

from datetime import date

from src.presence_report.presence_report.daily.builder import build_daily_rows
from src.presence_report.presence_report.events.model import event_from_row
from src.presence_report.presence_report.shifts.engine import aggregate_shifts
from src.presence_report.presence_report.summary.engine import summarize_attendance

ROWS = [
    {"id_user": "42", "name": "Ana", "email": "ana@example.com", "date": "2026-01-06T09:00:00Z", "away_mode_enabled": 0, "away_status_reason": None},
    {"id_user": "42", "name": "Ana", "email": "ana@example.com", "date": "2026-01-06T09:30:00Z", "away_mode_enabled": 1, "away_status_reason": "Almoço"},
    {"id_user": "42", "name": "Ana", "email": "ana@example.com", "date": "2026-01-06T10:00:00Z", "away_mode_enabled": 0, "away_status_reason": None},
    {"id_user": "42", "name": "Ana", "email": "ana@example.com", "date": "2026-01-06T12:30:00Z", "away_mode_enabled": 1, "away_status_reason": None},
]


def main():
    events = [event_from_row(r) for r in ROWS]

    for s in summarize_attendance(events):
        print(s.to_dict())
    for d in aggregate_shifts(events):
        print(d.to_dict())
    for row in build_daily_rows(events, date(2026, 1, 5), date(2026, 1, 7)):
        print(row.to_dict())


if __name__ == "__main__":
    main()
