from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..common.formatting import format_minutes
from ..core.enums import PresenceStatus


@dataclass(frozen=True)
class DailyRow:
    """One calendar day of the per-attendant report (empty days included)."""

    date: date
    weekday: str
    label: str
    total_present_minutes: float = 0.0
    total_away_minutes: float = 0.0
    first_event_time: Optional[str] = None
    last_event_time: Optional[str] = None
    current_status: PresenceStatus = PresenceStatus.NONE
    reasons: tuple[str, ...] = field(default_factory=tuple)
    away_events: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "weekday": self.weekday,
            "label": self.label,
            "total_present_minutes": self.total_present_minutes,
            "total_away_minutes": self.total_away_minutes,
            "total_present_formatted": format_minutes(self.total_present_minutes),
            "total_away_formatted": format_minutes(self.total_away_minutes),
            "first_event_time": self.first_event_time,
            "last_event_time": self.last_event_time,
            "current_status": self.current_status.value,
            "reasons": list(self.reasons),
            "away_events": list(self.away_events),
        }
