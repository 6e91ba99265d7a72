"""Hour-by-hour crowd and heat estimates for a location."""

from __future__ import annotations

import math

from tripguide.domain.enums import LocationType
from tripguide.domain.models import Location, TimelinePoint

BASE_CROWD_BY_TYPE: dict[LocationType, float] = {
    LocationType.TEMPLE: 0.58,
    LocationType.NATURE: 0.42,
    LocationType.DINING: 0.55,
    LocationType.SHOPPING: 0.5,
    LocationType.MUSEUM: 0.47,
    LocationType.CULTURE: 0.46,
}
FIRST_HOUR = 6
LAST_HOUR = 20


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def crowd_level(location_type: LocationType, hour: int) -> float:
    base = BASE_CROWD_BY_TYPE.get(location_type, 0.5)
    lunch = 0.12 if 11 <= hour <= 13 else 0.0
    sunset = 0.16 if 16 <= hour <= 18 else 0.0
    # Temples close at dusk; everything else fills up in the evening.
    evening = 0.18 if hour >= 18 and location_type != LocationType.TEMPLE else 0.0
    morning_quiet = -0.12 if hour <= 8 else 0.0
    return _clamp(base + lunch + sunset + evening + morning_quiet)


def heat_level(hour: int) -> float:
    peak = math.exp(-((hour - 13) ** 2) / 10)
    return _clamp(0.22 + peak * 0.72)


def crowd_heat_timeline(location: Location) -> list[TimelinePoint]:
    return [
        TimelinePoint(hour=hour, crowd=crowd_level(location.type, hour), heat=heat_level(hour))
        for hour in range(FIRST_HOUR, LAST_HOUR + 1)
    ]


__all__ = ["crowd_heat_timeline", "crowd_level", "heat_level"]
