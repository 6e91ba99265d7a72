"""Parsers for the free-text ``duration`` and ``best_time`` location fields.

Catalog data is hand-written and inconsistent, so both parsers fall back to a
default instead of failing. Pass ``strict=True`` to surface unknown formats as
:class:`UnparseableFieldError` (useful when validating a new data file).
"""

from __future__ import annotations

import math
import re

from tripguide.domain.constants import DEFAULT_IDEAL_MINUTES, DEFAULT_VISIT_MINUTES
from tripguide.domain.exceptions import InvalidTimeOfDay, UnparseableFieldError

_RANGE_RE = re.compile(r"(\d+(?:\.\d+)?)\s*-\s*(\d+(?:\.\d+)?)")
_HOURS_RE = re.compile(r"(\d+(?:\.\d+)?)\s*hour", re.IGNORECASE)
_MINUTES_RE = re.compile(r"(\d+)\s*min", re.IGNORECASE)
_CLOCK_RE = re.compile(r"(\d+):(\d+)\s*(AM|PM)", re.IGNORECASE)
_HHMM_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def round_half_up(value: float) -> int:
    # Halves round up (22.5 -> 23); builtin round() rounds them to even.
    return int(math.floor(value + 0.5))


def parse_duration_minutes(text: str | None, *, strict: bool = False) -> int:
    """Estimate visit length in minutes from text like "1-2 hours" or "45 mins".

    A range yields its midpoint in hours. Falls back to 75 minutes.
    """
    raw = str(text or "")

    m = _RANGE_RE.search(raw)
    if m:
        return round_half_up((float(m.group(1)) + float(m.group(2))) / 2 * 60)

    m = _HOURS_RE.search(raw)
    if m:
        return round_half_up(float(m.group(1)) * 60)

    m = _MINUTES_RE.search(raw)
    if m:
        return int(m.group(1))

    if strict:
        raise UnparseableFieldError("duration", raw)
    return DEFAULT_VISIT_MINUTES


def parse_best_time_minutes(text: str | None, *, strict: bool = False) -> int:
    """Minutes since midnight of the first "H:MM AM/PM" in ``text`` (8:00 AM if none)."""
    raw = str(text or "")
    m = _CLOCK_RE.search(raw)
    if not m:
        if strict:
            raise UnparseableFieldError("best_time", raw)
        return DEFAULT_IDEAL_MINUTES

    hour = int(m.group(1))
    minute = int(m.group(2))
    period = m.group(3).upper()
    if period == "PM" and hour < 12:
        hour += 12
    if period == "AM" and hour == 12:
        hour = 0
    return hour * 60 + minute


def format_clock(minutes: int) -> str:
    total = int(minutes) % (24 * 60)
    hour24, minute = divmod(total, 60)
    period = "AM" if hour24 < 12 else "PM"
    hour12 = hour24 % 12 or 12
    return f"{hour12}:{minute:02d} {period}"


def parse_clock_hhmm(text: str) -> int:
    """Minutes since midnight of a 24h "HH:MM" reading."""
    m = _HHMM_RE.match(str(text or ""))
    if not m:
        raise InvalidTimeOfDay(str(text))
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeOfDay(str(text))
    return hour * 60 + minute


__all__ = [
    "format_clock",
    "parse_best_time_minutes",
    "parse_clock_hhmm",
    "parse_duration_minutes",
    "round_half_up",
]
