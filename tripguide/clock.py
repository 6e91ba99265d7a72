"""Local time in Siem Reap."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from tripguide.domain.constants import CAMBODIA_TIMEZONE
from tripguide.domain.enums import DayPhase
from tripguide.domain.models import TimeSnapshot

GOLDEN_START = 17 * 60
GOLDEN_END = 18 * 60 + 30
NIGHT_END = 5 * 60


def day_phase(total_minutes: int) -> DayPhase:
    if GOLDEN_START <= total_minutes <= GOLDEN_END:
        return DayPhase.GOLDEN
    if total_minutes < NIGHT_END or total_minutes > GOLDEN_END:
        return DayPhase.NIGHT
    return DayPhase.DAY


def cambodia_time_snapshot(now: Optional[datetime] = None) -> TimeSnapshot:
    """Clock reading in Asia/Phnom_Penh. Naive ``now`` values are treated as UTC."""
    tz = ZoneInfo(CAMBODIA_TIMEZONE)
    if now is None:
        local = datetime.now(tz)
    elif now.tzinfo is None:
        local = now.replace(tzinfo=ZoneInfo("UTC")).astimezone(tz)
    else:
        local = now.astimezone(tz)

    total = local.hour * 60 + local.minute
    phase = day_phase(total)
    return TimeSnapshot(
        hour=local.hour,
        minute=local.minute,
        total_minutes=total,
        is_golden_hour=phase is DayPhase.GOLDEN,
        phase=phase,
    )


__all__ = ["cambodia_time_snapshot", "day_phase"]
