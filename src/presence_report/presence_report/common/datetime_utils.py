from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from typing import Any, Iterator

from ..core.exceptions import InvalidTimestamp, ValidationError

# Optional fraction and offset at the end of an ISO-8601 timestamp.
_ISO_TAIL = re.compile(r"(?:\.(?P<fraction>\d+))?(?P<offset>[+-]\d{2}:?\d{2})?$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}") from None


def parse_timestamp(value: Any) -> datetime:
    """Parse an event timestamp into an aware UTC datetime.

    Accepts ``datetime`` objects (MySQL DATETIME columns come back naive) and
    ISO-8601 strings, with or without a trailing ``Z``. Naive values are taken
    as UTC; aware values are converted to UTC.
    """

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        text = _normalize_iso_tail(text)
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidTimestamp(value) from None
    else:
        raise InvalidTimestamp(value)

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _normalize_iso_tail(text: str) -> str:
    """Pad/trim the fraction to 6 digits and write offsets as ``+HH:MM``.

    Older ``datetime.fromisoformat`` only reads what ``isoformat()`` writes,
    while sources such as Postgres trim trailing zeros of the fraction.
    """

    match = _ISO_TAIL.search(text)
    if not match or not (match.group("fraction") or match.group("offset")):
        return text

    tail = ""
    fraction = match.group("fraction")
    if fraction:
        tail += "." + fraction[:6].ljust(6, "0")
    offset = match.group("offset")
    if offset:
        digits = offset[1:].replace(":", "")
        tail += f"{offset[0]}{digits[:2]}:{digits[2:]}"
    return text[: match.start()] + tail


def minutes_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 60


def minute_of_day(ts: datetime) -> float:
    """Minutes since UTC midnight, seconds included."""
    ts = ts.astimezone(timezone.utc)
    return ts.hour * 60 + ts.minute + ts.second / 60 + ts.microsecond / 60_000_000


def clock_minute(ts: datetime) -> int:
    """Whole minute of the UTC day (HH*60 + MM), as shown on a clock."""
    ts = ts.astimezone(timezone.utc)
    return ts.hour * 60 + ts.minute


def at_minute(day: date, minute: int) -> datetime:
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc) + timedelta(minutes=minute)


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Every calendar date in [start, end], inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def utc_today() -> date:
    """Current UTC date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc).date()
