from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from .core.constants import DEFAULT_PAGE_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .events.mysql_event_repository import MySQLAttendanceEventRepository
from .reports.service import AttendanceReportService
from .shifts.engine import ShiftAggregator
from .shifts.model import DEFAULT_SHIFT_TABLE, ShiftTable


@dataclass(frozen=True)
class Container:
    report_service: AttendanceReportService


def build_container(
    *,
    db_config: dict,
    page_size: int = DEFAULT_PAGE_SIZE,
    shift_windows: Optional[Iterable[Mapping[str, Any]]] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    shift_table = ShiftTable.from_config(shift_windows) if shift_windows else DEFAULT_SHIFT_TABLE

    events_repo = MySQLAttendanceEventRepository(conn, page_size=page_size)
    report_service = AttendanceReportService(events_repo, aggregator=ShiftAggregator(shift_table))

    return Container(report_service=report_service)
