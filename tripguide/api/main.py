"""FastAPI application for the Siem Reap guide planner."""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from tripguide import __version__
from tripguide.api.schemas import (
    CrowdResponse,
    DayPlanBody,
    DayPlanResponse,
    FareResponse,
    HealthResponse,
    LocationListResponse,
)
from tripguide.catalog.locations import filter_locations, get_location, load_locations
from tripguide.config.settings import resolve_settings
from tripguide.domain.exceptions import DomainError, LocationNotFound
from tripguide.domain.models import ErrorResponse, Location
from tripguide.parsing.text_fields import parse_clock_hhmm
from tripguide.planner.crowd import crowd_heat_timeline
from tripguide.planner.distance import haversine_km
from tripguide.planner.fare import estimate_tuktuk_fare
from tripguide.services.contracts import DayPlanRequest
from tripguide.services.plan_service import execute_day_plan
from tripguide.shared.exceptions import ToolError

_api_logger = logging.getLogger("tripguide.api")

load_dotenv()

app = FastAPI(
    title="tripguide",
    version=__version__,
    docs_url="/docs" if resolve_settings().enable_docs else None,
    redoc_url=None,
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response


app.add_middleware(SecurityHeadersMiddleware)

_cors_origins = os.getenv("CORS_ORIGINS", "*").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


def _error(status_code: int, code: str, message: str) -> JSONResponse:
    payload = ErrorResponse(code=code, message=message)
    return JSONResponse(status_code=status_code, content=payload.model_dump())


@app.exception_handler(LocationNotFound)
async def _location_not_found(_request: Request, exc: LocationNotFound) -> JSONResponse:
    return _error(404, "LOCATION_NOT_FOUND", str(exc))


@app.exception_handler(DomainError)
async def _domain_error(_request: Request, exc: DomainError) -> JSONResponse:
    return _error(400, type(exc).__name__, str(exc))


@app.exception_handler(ToolError)
async def _tool_error(_request: Request, exc: ToolError) -> JSONResponse:
    _api_logger.error("data source failure: %s", exc)
    return _error(503, "DATA_UNAVAILABLE", "Location data is unavailable")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()


@app.get("/locations", response_model=LocationListResponse)
def list_locations(
    location_type: Optional[str] = Query(default=None, alias="type", description="Location type or All"),
    q: str = Query(default="", max_length=200),
) -> LocationListResponse:
    locations = load_locations(resolve_settings().locations_file)
    matched = filter_locations(locations, location_type=location_type, query=q)
    return LocationListResponse(count=len(matched), locations=matched)


@app.get("/locations/{location_id}", response_model=Location)
def location_detail(location_id: int) -> Location:
    locations = load_locations(resolve_settings().locations_file)
    return get_location(location_id, locations)


@app.get("/locations/{location_id}/fare", response_model=FareResponse)
def location_fare(
    location_id: int,
    lat: float = Query(ge=-90.0, le=90.0),
    lng: float = Query(ge=-180.0, le=180.0),
) -> FareResponse:
    location = get_location(location_id, load_locations(resolve_settings().locations_file))
    distance = haversine_km(lat, lng, location.lat, location.lng)
    return FareResponse(location_id=location.id, fare=estimate_tuktuk_fare(distance))


@app.get("/locations/{location_id}/crowd", response_model=CrowdResponse)
def location_crowd(location_id: int) -> CrowdResponse:
    location = get_location(location_id, load_locations(resolve_settings().locations_file))
    return CrowdResponse(location_id=location.id, timeline=crowd_heat_timeline(location))


@app.post("/day-plan", response_model=DayPlanResponse)
def day_plan(body: DayPlanBody) -> DayPlanResponse:
    request = DayPlanRequest(
        lat=body.lat,
        lng=body.lng,
        current_minutes=parse_clock_hhmm(body.current_time) if body.current_time is not None else None,
        location_type=body.location_type,
        query=body.query,
        nearby_only=body.nearby_only,
        location_ids=body.location_ids,
        max_stops=body.max_stops,
        strict=body.strict,
    )
    result = execute_day_plan(request, settings=resolve_settings())
    return DayPlanResponse(**result.model_dump())
