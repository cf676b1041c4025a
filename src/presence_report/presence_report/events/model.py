from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_timestamp
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one observed away/online transition of an attendant."""

    id_user: str
    name: str
    email: str
    timestamp: datetime
    away: bool
    away_reason: Optional[str] = None
    event_id: Optional[str] = None

    @property
    def day(self) -> date:
        """UTC calendar date of the event."""
        return self.timestamp.date()


@dataclass(frozen=True)
class Attendant:
    id_user: str
    name: str
    email: str


def _as_away_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    try:
        flag = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid away_mode_enabled: {value!r}") from None
    if flag not in (0, 1):
        raise ValidationError(f"Invalid away_mode_enabled: {value!r}")
    return flag == 1


def event_from_row(row: Mapping[str, Any]) -> AttendanceEvent:
    """Map a source row (``date``, ``away_mode_enabled``, ...) to an event."""

    if row.get("id_user") in (None, ""):
        raise ValidationError("id_user is required")

    reason = row.get("away_status_reason")
    event_id = row.get("id")
    return AttendanceEvent(
        id_user=str(row["id_user"]),
        name=str(row.get("name") or ""),
        email=str(row.get("email") or ""),
        timestamp=parse_timestamp(row.get("date")),
        away=_as_away_flag(row.get("away_mode_enabled", 0)),
        away_reason=str(reason) if reason else None,
        event_id=str(event_id) if event_id is not None else None,
    )
