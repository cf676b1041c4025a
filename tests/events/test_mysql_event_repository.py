from __future__ import annotations

from datetime import date, datetime

from src.presence_report.presence_report.events.mysql_event_repository import MySQLAttendanceEventRepository


class FakeCursor:
    def __init__(self, rows, executed):
        self._rows = rows
        self._executed = executed
        self._result = []

    def execute(self, sql, params=None):
        self._executed.append((" ".join(sql.split()), params))
        if params and "LIMIT" in sql:
            limit, offset = params[-2], params[-1]
            self._result = self._rows[offset : offset + limit]
        else:
            self._result = list(self._rows)

    def fetchall(self):
        return self._result

    def close(self):
        pass


class FakeConnection:
    def __init__(self, rows, executed):
        self._rows = rows
        self._executed = executed
        self.closed = False

    def cursor(self, dictionary=True):
        return FakeCursor(self._rows, self._executed)

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, rows):
        self.rows = rows
        self.executed = []

    def connect(self):
        return FakeConnection(self.rows, self.executed)


def make_rows(n, user="1"):
    return [
        {
            "id": i,
            "id_user": user,
            "name": "Ana",
            "email": "ana@example.com",
            "date": datetime(2026, 1, 6, 8, 0) if i % 2 == 0 else datetime(2026, 1, 6, 9, 0),
            "away_mode_enabled": i % 2,
            "away_status_reason": "Pausa" if i % 2 else None,
        }
        for i in range(n)
    ]


def test_list_by_date_range_pages_until_short_page():
    factory = FakeConnFactory(make_rows(5))
    repo = MySQLAttendanceEventRepository(factory, page_size=2)

    events = repo.list_by_date_range(date(2026, 1, 6), date(2026, 1, 6))

    assert len(events) == 5
    assert [params[-2:] for _, params in factory.executed] == [(2, 0), (2, 2), (2, 4)]
    sql, params = factory.executed[0]
    assert "ORDER BY date ASC" in sql
    assert params[:2] == ("2026-01-06 00:00:00", "2026-01-06 23:59:59")


def test_exact_multiple_of_page_size_needs_one_empty_page():
    factory = FakeConnFactory(make_rows(4))
    repo = MySQLAttendanceEventRepository(factory, page_size=2)

    events = repo.list_by_user("1")

    assert len(events) == 4
    assert len(factory.executed) == 3
    sql, params = factory.executed[0]
    assert "WHERE id_user=%s" in sql
    assert params == ("1", 2, 0)


def test_rows_are_mapped_to_events():
    factory = FakeConnFactory(make_rows(2))
    repo = MySQLAttendanceEventRepository(factory)

    first, second = repo.list_by_user("1", date(2026, 1, 1))

    assert first.away is False
    assert second.away is True
    assert second.away_reason == "Pausa"
    assert first.timestamp.tzinfo is not None


def test_latest_per_user_keeps_last_row_per_user():
    rows = make_rows(2) + make_rows(1, user="2")
    repo = MySQLAttendanceEventRepository(FakeConnFactory(rows))

    latest = repo.list_latest_per_user()

    assert [(e.id_user, e.event_id) for e in latest] == [("1", "1"), ("2", "0")]
