from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Optional

_WEEKDAYS_PT = (
    "segunda-feira",
    "terça-feira",
    "quarta-feira",
    "quinta-feira",
    "sexta-feira",
    "sábado",
    "domingo",
)


def round_half_up(value: float) -> int:
    # Built-in round() is banker's rounding; percentages must round .5 up.
    return int(math.floor(value + 0.5))


def percent(part: float, total: float, *, empty: int) -> int:
    if total <= 0:
        return empty
    return round_half_up(part / total * 100)


def format_minutes(minutes: Optional[float]) -> str:
    """Human duration: ``0m``, ``45m``, ``7h 5m``.

    The total is rounded before splitting so we never print ``7h 60m``.
    """

    if not minutes or minutes <= 0:
        return "0m"
    total = round_half_up(minutes)
    hours, rest = divmod(total, 60)
    return f"{hours}h {rest}m" if hours > 0 else f"{rest}m"


def format_hhmm(ts: Optional[datetime]) -> Optional[str]:
    if ts is None:
        return None
    return ts.astimezone(timezone.utc).strftime("%H:%M")


def format_iso(ts: Optional[datetime]) -> Optional[str]:
    if ts is None:
        return None
    return ts.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def weekday_pt(day: date) -> str:
    return _WEEKDAYS_PT[day.weekday()]


def day_label(day: date) -> str:
    """``Segunda-feira - 06/01/2026``."""
    weekday = weekday_pt(day)
    return f"{weekday[:1].upper()}{weekday[1:]} - {day.strftime('%d/%m/%Y')}"
