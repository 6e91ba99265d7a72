"""Deterministic planning algorithms."""

from tripguide.planner.crowd import crowd_heat_timeline
from tripguide.planner.day_plan import build_day_plan
from tripguide.planner.distance import estimate_travel_minutes, haversine_km
from tripguide.planner.fare import estimate_tuktuk_fare

__all__ = [
    "build_day_plan",
    "crowd_heat_timeline",
    "estimate_travel_minutes",
    "estimate_tuktuk_fare",
    "haversine_km",
]
