"""Deterministic distance and travel-time estimation."""

from __future__ import annotations

import math

from tripguide.domain.constants import AVERAGE_SPEED_KMH, EARTH_RADIUS_KM


def haversine_km(from_lat: float, from_lng: float, to_lat: float, to_lng: float) -> float:
    dlat = math.radians(to_lat - from_lat)
    dlng = math.radians(to_lng - from_lng)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(from_lat))
        * math.cos(math.radians(to_lat))
        * math.sin(dlng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def estimate_travel_minutes(distance_km: float, speed_kmh: float = AVERAGE_SPEED_KMH) -> float:
    return (distance_km / speed_kmh) * 60


__all__ = ["estimate_travel_minutes", "haversine_km"]
