"""Greedy same-day itinerary builder.

Stops are picked one at a time. Each round scores every unused candidate by
distance from the current position plus how far the simulated clock is from
the candidate's ideal visit time, takes the lowest score, then advances the
position and the clock. There is no backtracking, so results depend on the
input order when scores tie.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from tripguide.domain.constants import (
    CANDIDATE_POOL_LIMIT,
    DEFAULT_MAX_STOPS,
    SCHEDULE_PENALTY_DIVISOR,
    TRAVEL_SCORE_DIVISOR,
)
from tripguide.domain.models import DayPlan, Location, PlannedStop
from tripguide.parsing.text_fields import parse_best_time_minutes, parse_duration_minutes, round_half_up
from tripguide.planner.distance import estimate_travel_minutes, haversine_km


def score_candidate(distance_km: float, rolling_minutes: float, ideal_minutes: int) -> float:
    schedule_penalty = abs(rolling_minutes - ideal_minutes) / SCHEDULE_PENALTY_DIVISOR
    return distance_km + schedule_penalty + estimate_travel_minutes(distance_km) / TRAVEL_SCORE_DIVISOR


def _pick_next(
    pool: Sequence[Location],
    used_ids: set[int],
    *,
    cur_lat: float,
    cur_lng: float,
    rolling_minutes: float,
    strict: bool,
) -> tuple[Optional[Location], float]:
    best: Optional[Location] = None
    best_score = float("inf")
    best_distance = 0.0
    for location in pool:
        if location.id in used_ids:
            continue
        distance_km = haversine_km(cur_lat, cur_lng, location.lat, location.lng)
        ideal = parse_best_time_minutes(location.best_time, strict=strict)
        score = score_candidate(distance_km, rolling_minutes, ideal)
        # Strict comparison: the earliest candidate wins a tie.
        if score < best_score:
            best = location
            best_score = score
            best_distance = distance_km
    return best, best_distance


def build_day_plan(
    candidates: Sequence[Location],
    current_minutes: float,
    start_lat: float,
    start_lng: float,
    max_stops: int = DEFAULT_MAX_STOPS,
    *,
    pool_limit: int = CANDIDATE_POOL_LIMIT,
    strict: bool = False,
) -> DayPlan:
    pool = list(candidates[:pool_limit])
    target = min(max_stops, len(pool))
    if target <= 0:
        return DayPlan.empty()

    stops: list[PlannedStop] = []
    used_ids: set[int] = set()
    cur_lat, cur_lng = start_lat, start_lng
    rolling_minutes = current_minutes

    while len(stops) < target:
        winner, distance_km = _pick_next(
            pool,
            used_ids,
            cur_lat=cur_lat,
            cur_lng=cur_lng,
            rolling_minutes=rolling_minutes,
            strict=strict,
        )
        if winner is None:
            break

        travel_minutes = round_half_up(estimate_travel_minutes(distance_km))
        visit_minutes = parse_duration_minutes(winner.duration, strict=strict)
        stops.append(
            PlannedStop(
                location=winner,
                travel_km=distance_km,
                travel_minutes=travel_minutes,
                visit_minutes=visit_minutes,
            )
        )

        used_ids.add(winner.id)
        cur_lat, cur_lng = winner.lat, winner.lng
        rolling_minutes += travel_minutes + visit_minutes

    return DayPlan(
        stops=stops,
        total_travel_km=sum(stop.travel_km for stop in stops),
        total_travel_minutes=sum(stop.travel_minutes for stop in stops),
        total_visit_minutes=sum(stop.visit_minutes for stop in stops),
    )


__all__ = ["build_day_plan", "score_candidate"]
