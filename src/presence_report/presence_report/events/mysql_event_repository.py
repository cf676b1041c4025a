from __future__ import annotations

from datetime import date
from typing import Any, List, Optional, Sequence, Tuple

from ..core.constants import DEFAULT_PAGE_SIZE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_paginated, fetchall
from .model import AttendanceEvent, Attendant, event_from_row
from .repository import AttendanceEventRepository

_EVENT_COLUMNS = "id, id_user, name, email, date, away_mode_enabled, away_status_reason"


def _range_filters(start: Optional[date], end: Optional[date]) -> Tuple[List[str], List[Any]]:
    clauses: List[str] = []
    params: List[Any] = []
    if start:
        clauses.append("date >= %s")
        params.append(f"{start.isoformat()} 00:00:00")
    if end:
        clauses.append("date <= %s")
        params.append(f"{end.isoformat()} 23:59:59")
    return clauses, params


def _where(clauses: List[str]) -> str:
    return f"WHERE {' AND '.join(clauses)}" if clauses else ""


class MySQLAttendanceEventRepository(AttendanceEventRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, page_size: int = DEFAULT_PAGE_SIZE):
        self._conn_factory = conn_factory
        self._page_size = int(page_size)

    def _list_events(self, clauses: List[str], params: List[Any]) -> Sequence[AttendanceEvent]:
        sql = f"""
            SELECT {_EVENT_COLUMNS}
            FROM intercom_attendance
            {_where(clauses)}
            ORDER BY date ASC, id ASC
        """
        rows = fetch_paginated(self._conn_factory, sql, params, page_size=self._page_size)
        return [event_from_row(r) for r in rows]

    def list_by_date_range(self, start: date, end: date) -> Sequence[AttendanceEvent]:
        clauses, params = _range_filters(start, end)
        return self._list_events(clauses, params)

    def list_by_user(
        self,
        user_id: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[AttendanceEvent]:
        clauses, params = _range_filters(start, end)
        return self._list_events(["id_user=%s", *clauses], [str(user_id), *params])

    def list_by_name(
        self,
        name: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[AttendanceEvent]:
        clauses, params = _range_filters(start, end)
        return self._list_events(["LOWER(name) LIKE %s", *clauses], [f"%{name.lower()}%", *params])

    def list_attendants(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[Attendant]:
        clauses, params = _range_filters(start, end)
        sql = f"""
            SELECT id_user, MIN(name) AS name, MIN(email) AS email
            FROM intercom_attendance
            {_where(clauses)}
            GROUP BY id_user
            ORDER BY id_user
        """
        rows = fetch_paginated(self._conn_factory, sql, params, page_size=self._page_size)
        attendants = [
            Attendant(id_user=str(r["id_user"]), name=str(r.get("name") or ""), email=str(r.get("email") or ""))
            for r in rows
        ]
        attendants.sort(key=lambda a: a.name.lower())
        return attendants

    def list_latest_per_user(self) -> Sequence[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.id, a.id_user, a.name, a.email, a.date, a.away_mode_enabled, a.away_status_reason
                FROM intercom_attendance a
                JOIN (
                    SELECT id_user, MAX(date) AS last_date
                    FROM intercom_attendance
                    GROUP BY id_user
                ) latest ON latest.id_user = a.id_user AND latest.last_date = a.date
                ORDER BY a.date ASC, a.id ASC
                """
            )
            rows = fetchall(cur)
        latest: dict[str, AttendanceEvent] = {}
        for r in rows:
            # Several rows can share the max timestamp; the last one (by id) wins.
            event = event_from_row(r)
            latest[event.id_user] = event
        return list(latest.values())
