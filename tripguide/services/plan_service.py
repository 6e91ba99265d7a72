"""Application service for the day-plan use-case."""

from __future__ import annotations

from typing import Optional

from tripguide.catalog.locations import filter_locations, load_locations
from tripguide.clock import cambodia_time_snapshot
from tripguide.config.settings import PlannerSettings, resolve_settings
from tripguide.domain.models import Location
from tripguide.infrastructure.logging import StructuredLogger
from tripguide.planner.day_plan import build_day_plan
from tripguide.services.contracts import DayPlanRequest, DayPlanResult
from tripguide.services.itinerary_presenter import present_day_plan


def _select_candidates(request: DayPlanRequest, locations: list[Location]) -> list[Location]:
    near = None
    if request.nearby_only and request.lat is not None and request.lng is not None:
        near = (request.lat, request.lng)
    candidates = filter_locations(
        locations,
        location_type=request.location_type,
        query=request.query,
        near=near,
    )
    if request.location_ids is not None:
        wanted = set(request.location_ids)
        candidates = [location for location in candidates if location.id in wanted]
    return candidates


def execute_day_plan(
    request: DayPlanRequest,
    *,
    settings: Optional[PlannerSettings] = None,
    locations: Optional[list[Location]] = None,
    logger: Optional[StructuredLogger] = None,
) -> DayPlanResult:
    settings = settings or resolve_settings()
    logger = logger or StructuredLogger()
    logger.step_start("day_plan")

    pool = load_locations(settings.locations_file) if locations is None else list(locations)
    candidates = _select_candidates(request, pool)

    used_default_start = request.lat is None or request.lng is None
    if used_default_start:
        start_lat, start_lng = settings.default_start_lat, settings.default_start_lng
    else:
        start_lat, start_lng = request.lat, request.lng

    current_minutes = request.current_minutes
    if current_minutes is None:
        current_minutes = cambodia_time_snapshot().total_minutes

    strict = settings.strict_parsing if request.strict is None else request.strict
    max_stops = settings.max_stops if request.max_stops is None else request.max_stops

    plan = build_day_plan(
        candidates,
        current_minutes,
        start_lat,
        start_lng,
        max_stops,
        pool_limit=settings.pool_limit,
        strict=strict,
    )

    if not plan.stops:
        logger.warning("day_plan", "no stops produced", candidate_count=len(candidates))
    logger.step_end(
        "day_plan",
        candidate_count=len(candidates),
        stop_count=len(plan.stops),
        used_default_start=used_default_start,
    )
    return DayPlanResult(
        plan=plan,
        presented=present_day_plan(plan),
        start_lat=start_lat,
        start_lng=start_lng,
        current_minutes=current_minutes,
        used_default_start=used_default_start,
        candidate_count=len(candidates),
        trace_id=logger.trace_id,
    )


__all__ = ["execute_day_plan"]
