from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, Iterator, Mapping, Optional

from ..common.datetime_utils import at_minute
from ..common.formatting import format_hhmm, format_iso, format_minutes
from ..core.enums import ShiftStatus
from ..core.exceptions import ValidationError

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True)
class ShiftWindow:
    """Domain entity: a fixed minute-of-day window (UTC).

    ``start_minute`` and ``end_minute`` are both inclusive clock minutes, so
    the window covers the half-open span ``[start_minute, end_minute + 1)``.
    Adjacent windows (719/720, 1080/1081) therefore never share a minute.
    """

    name: str
    start_minute: int
    end_minute: int
    icon: str = ""
    overtime_after_minute: Optional[int] = None

    def __post_init__(self):
        if not 0 <= self.start_minute <= self.end_minute < MINUTES_PER_DAY:
            raise ValidationError(f"Invalid shift window {self.name}: {self.start_minute}..{self.end_minute}")

    @property
    def overtime_limit(self) -> int:
        if self.overtime_after_minute is None:
            return self.end_minute
        return self.overtime_after_minute

    def contains_minute(self, minute: int) -> bool:
        return self.start_minute <= minute <= self.end_minute

    def overlap_minutes(self, start: float, end: float) -> float:
        """Minutes of ``[start, end)`` (minute-of-day) falling in this window."""
        overlap = min(end, self.end_minute + 1) - max(start, self.start_minute)
        return overlap if overlap > 0 else 0.0

    def start_at(self, day: date) -> datetime:
        return at_minute(day, self.start_minute)

    def end_at(self, day: date) -> datetime:
        return at_minute(day, self.end_minute)


@dataclass(frozen=True)
class ShiftTable:
    """Immutable, ordered set of non-overlapping shift windows."""

    windows: tuple[ShiftWindow, ...]

    def __post_init__(self):
        if not self.windows:
            raise ValidationError("A shift table needs at least one window")
        names = [w.name for w in self.windows]
        if len(set(names)) != len(names):
            raise ValidationError(f"Duplicate shift names: {names}")
        ordered = sorted(self.windows, key=lambda w: w.start_minute)
        for prev, nxt in zip(ordered, ordered[1:]):
            if nxt.start_minute <= prev.end_minute:
                raise ValidationError(f"Shift windows overlap: {prev.name} / {nxt.name}")

    def __iter__(self) -> Iterator[ShiftWindow]:
        return iter(self.windows)

    def __len__(self) -> int:
        return len(self.windows)

    def get(self, name: str) -> ShiftWindow:
        for window in self.windows:
            if window.name == name:
                return window
        raise KeyError(name)

    @classmethod
    def from_config(cls, items: Iterable[Mapping[str, Any]]) -> "ShiftTable":
        """Build from settings, e.g. ``[{"name": "Manhã", "start": 360, "end": 719, ...}]``."""
        return cls(
            windows=tuple(
                ShiftWindow(
                    name=str(item["name"]),
                    start_minute=int(item["start"]),
                    end_minute=int(item["end"]),
                    icon=str(item.get("icon") or ""),
                    overtime_after_minute=(
                        int(item["overtime_after"]) if item.get("overtime_after") is not None else None
                    ),
                )
                for item in items
            )
        )


DEFAULT_SHIFT_TABLE = ShiftTable(
    windows=(
        ShiftWindow("Manhã", 6 * 60, 11 * 60 + 59, "🌅", 12 * 60),
        ShiftWindow("Tarde", 12 * 60, 18 * 60, "☀️", 18 * 60),
        ShiftWindow("Noite", 18 * 60 + 1, 23 * 60 + 59, "🌙", 22 * 60),
    )
)


@dataclass(frozen=True)
class ShiftRecord:
    """Read-model: presence of one attendant in one shift of one day."""

    id_user: str
    name: str
    email: str
    date: date
    shift: str
    shift_icon: str
    entry_timestamp: datetime
    exit_timestamp: datetime
    present_minutes: int
    away_minutes: int
    availability_percent: int
    status: ShiftStatus
    status_label: str

    def to_dict(self) -> dict:
        return {
            "id_user": self.id_user,
            "name": self.name,
            "email": self.email,
            "date": self.date.isoformat(),
            "shift": self.shift,
            "shift_icon": self.shift_icon,
            "entry": format_iso(self.entry_timestamp),
            "exit": format_iso(self.exit_timestamp),
            "entry_formatted": format_hhmm(self.entry_timestamp),
            "exit_formatted": format_hhmm(self.exit_timestamp),
            "present_minutes": self.present_minutes,
            "away_minutes": self.away_minutes,
            "present_formatted": format_minutes(self.present_minutes),
            "away_formatted": format_minutes(self.away_minutes),
            "availability_percent": self.availability_percent,
            "status": self.status.value,
            "status_label": self.status_label,
        }


@dataclass(frozen=True)
class DailySummary:
    id_user: str
    name: str
    email: str
    date: date
    shifts: tuple[ShiftRecord, ...] = field(default_factory=tuple)
    total_present_minutes: int = 0
    total_away_minutes: int = 0
    total_availability_percent: int = 0

    def to_dict(self) -> dict:
        return {
            "id_user": self.id_user,
            "name": self.name,
            "email": self.email,
            "date": self.date.isoformat(),
            "shifts": [s.to_dict() for s in self.shifts],
            "total_present_minutes": self.total_present_minutes,
            "total_away_minutes": self.total_away_minutes,
            "total_present_formatted": format_minutes(self.total_present_minutes),
            "total_away_formatted": format_minutes(self.total_away_minutes),
            "total_availability_percent": self.total_availability_percent,
        }
