"""
Day and time helpers for the scheduler.

Day names arrive as free text from the zone and employee tables, so
normalization is permissive: anything unrecognized is handed back unchanged
and simply never matches a schedule day.
"""

import math
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterator, Optional, Union

from .types import Weekday

DateLike = Union[date, datetime, str]

DAY_ALIASES: dict[str, Weekday] = {
    "monday": Weekday.MON,
    "mon": Weekday.MON,
    "tuesday": Weekday.TUE,
    "tue": Weekday.TUE,
    "tues": Weekday.TUE,
    "wednesday": Weekday.WED,
    "wed": Weekday.WED,
    "weds": Weekday.WED,
    "thursday": Weekday.THU,
    "thu": Weekday.THU,
    "thur": Weekday.THU,
    "thurs": Weekday.THU,
    "friday": Weekday.FRI,
    "fri": Weekday.FRI,
    "saturday": Weekday.SAT,
    "sat": Weekday.SAT,
    "sunday": Weekday.SUN,
    "sun": Weekday.SUN,
}


def normalize_day(value):
    """Map a day name in any case or abbreviation to "Mon".."Sun".

    Unrecognized input (including None) is returned as-is.
    """
    if not isinstance(value, str):
        return value
    day = DAY_ALIASES.get(value.strip().lower())
    return day.value if day else value


def to_weekday(value) -> Optional[Weekday]:
    """Enum boundary over normalize_day. None when the day is unrecognized."""
    normalized = normalize_day(value)
    if isinstance(normalized, Weekday):
        return normalized
    try:
        return Weekday(normalized)
    except ValueError:
        return None


_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_RADIX = re.compile(r"0([xXoObB])([0-9a-fA-F]+)", re.ASCII)
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}
_INFINITY = re.compile(r"([+-]?)Infinity")


def _component(text: str) -> float:
    """Numeric value of one "HH" or "MM" part, coerced the way a browser would.

    Blank is 0. Decimal, exponent, 0x/0o/0b literals and "Infinity" are
    accepted; anything else is NaN.
    """
    text = text.strip()
    if not text:
        return 0.0
    if _DECIMAL.fullmatch(text):
        return float(text)
    radix = _RADIX.fullmatch(text)
    if radix:
        try:
            return float(int(radix.group(2), _RADIX_BASES[radix.group(1).lower()]))
        except ValueError:
            return math.nan
    infinity = _INFINITY.fullmatch(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    return math.nan


def to_minutes(value) -> float:
    """Minutes since midnight for "HH:MM" (extra ":SS" ignored).

    Malformed input gives NaN, which compares false against everything.
    """
    if isinstance(value, time):
        return float(value.hour * 60 + value.minute)
    if not isinstance(value, str):
        return math.nan
    parts = value.split(":")
    hours = _component(parts[0])
    minutes = _component(parts[1]) if len(parts) > 1 else math.nan
    return hours * 60 + minutes


def times_overlap(start_a, end_a, start_b, end_b) -> bool:
    """Check if two half-open [start, end) windows on the same day overlap."""
    s_a, e_a = to_minutes(start_a), to_minutes(end_a)
    s_b, e_b = to_minutes(start_b), to_minutes(end_b)
    return s_a < e_b and s_b < e_a


def as_date(value: DateLike) -> date:
    """Calendar day of a date, datetime or ISO string. Aware datetimes use their UTC day."""
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def to_local_noon(value: DateLike) -> datetime:
    """Pin a calendar day to 12:00 local so weekday/date formatting can't slip a day."""
    return datetime.combine(as_date(value), time(12, 0))


def iter_days(start: DateLike, end: DateLike) -> Iterator[date]:
    """Yield each calendar day from start to end, both inclusive."""
    current = as_date(start)
    last = as_date(end)
    while current <= last:
        yield current
        current += timedelta(days=1)


def format_time(value) -> Optional[str]:
    """TIME columns come back as datetime.time; the engine works on "HH:MM"."""
    if isinstance(value, time):
        return value.strftime("%H:%M")
    return value
