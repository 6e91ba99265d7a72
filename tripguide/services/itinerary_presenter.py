"""Presentation helpers for day-plan payloads."""

from __future__ import annotations

from typing import Any

from tripguide.domain.models import DayPlan, PlannedStop
from tripguide.parsing.text_fields import round_half_up

NO_STOPS_MESSAGE = "Add more places to generate a day route."


def format_distance_km(distance_km: float) -> str:
    if distance_km < 1:
        return f"{round_half_up(distance_km * 1000)}m"
    return f"{distance_km:.2f}km"


def format_minutes(minutes: int) -> str:
    hours, rest = divmod(int(minutes), 60)
    if hours <= 0:
        return f"{rest}m"
    return f"{hours}h {rest}m"


def _present_stop(index: int, stop: PlannedStop) -> dict[str, Any]:
    return {
        "order": index,
        "location_id": stop.location.id,
        "name": stop.location.name,
        "type": stop.location.type.value,
        "travel": f"{format_distance_km(stop.travel_km)} • {format_minutes(stop.travel_minutes)}",
        "visit": format_minutes(stop.visit_minutes),
    }


def present_day_plan(plan: DayPlan) -> dict[str, Any]:
    if not plan.stops:
        return {"stops": [], "message": NO_STOPS_MESSAGE}
    return {
        "stops": [_present_stop(index, stop) for index, stop in enumerate(plan.stops, start=1)],
        "total": f"{format_distance_km(plan.total_travel_km)} • {format_minutes(plan.total_minutes)}",
    }


def render_day_plan_text(plan: DayPlan) -> str:
    """Plain-text itinerary for terminals."""
    presented = present_day_plan(plan)
    if not presented["stops"]:
        return presented["message"]
    lines: list[str] = []
    for row in presented["stops"]:
        lines.append(f"{row['order']}. {row['name']}")
        lines.append(f"   Travel: {row['travel']}  |  Visit: {row['visit']}")
    lines.append(f"Total: {presented['total']}")
    return "\n".join(lines)


__all__ = [
    "NO_STOPS_MESSAGE",
    "format_distance_km",
    "format_minutes",
    "present_day_plan",
    "render_day_plan_text",
]
