from __future__ import annotations

from enum import Enum


class PresenceStatus(str, Enum):
    """Current status of an attendant, taken from their last event."""

    ONLINE = "online"
    AWAY = "away"
    NONE = "none"


class TimelineEventType(str, Enum):
    ENTRY = "entry"
    EXIT = "exit"


class ShiftStatus(str, Enum):
    """Record quality of one shift of one day."""

    NORMAL = "normal"
    OVERTIME = "overtime"
    SUSPICIOUS = "suspicious"
    CHECKIN_ONLY = "checkin_only"
    HIGH_ABSENCE = "high_absence"


class EmptyDayPolicy(str, Enum):
    """How day bucketing treats calendar days without events."""

    SKIP = "skip"
    PLACEHOLDER = "placeholder"
