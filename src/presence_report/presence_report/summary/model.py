from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..common.formatting import format_iso, format_minutes
from ..core.enums import PresenceStatus, TimelineEventType


@dataclass(frozen=True)
class TimelineEntry:
    timestamp: datetime
    type: TimelineEventType
    reason: Optional[str]
    # None for the last event: its end is unknown.
    duration_minutes: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "timestamp": format_iso(self.timestamp),
            "type": self.type.value,
            "reason": self.reason,
            "duration_minutes": self.duration_minutes,
        }


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model for the overview dashboard: one attendant, whole range."""

    id_user: str
    name: str
    email: str
    total_present_minutes: float
    total_away_minutes: float
    current_status: PresenceStatus
    current_reason: Optional[str]
    availability_percent: int
    timeline: tuple[TimelineEntry, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "id_user": self.id_user,
            "name": self.name,
            "email": self.email,
            "total_present_minutes": self.total_present_minutes,
            "total_away_minutes": self.total_away_minutes,
            "total_present_formatted": format_minutes(self.total_present_minutes),
            "total_away_formatted": format_minutes(self.total_away_minutes),
            "current_status": self.current_status.value,
            "current_reason": self.current_reason,
            "availability_percent": self.availability_percent,
            "timeline": [t.to_dict() for t in self.timeline],
        }
