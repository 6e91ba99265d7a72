"""API request/response models."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from tripguide.domain.models import DayPlan, FareEstimate, Location, TimelinePoint


class DayPlanBody(BaseModel):
    lat: Optional[float] = Field(default=None, ge=-90.0, le=90.0, description="Current latitude, if known")
    lng: Optional[float] = Field(default=None, ge=-180.0, le=180.0, description="Current longitude, if known")
    current_time: Optional[str] = Field(
        default=None,
        pattern=r"^\d{1,2}:\d{2}$",
        description="24h HH:MM clock reading; defaults to the current time in Siem Reap",
    )
    location_type: Optional[str] = Field(default=None, description="Temple / Nature / ... or All")
    query: str = Field(default="", max_length=200)
    nearby_only: bool = False
    location_ids: Optional[list[int]] = Field(default=None, description="Restrict planning to these ids")
    max_stops: Optional[int] = Field(default=None, ge=0, le=20)
    strict: Optional[bool] = None


class DayPlanResponse(BaseModel):
    plan: DayPlan
    presented: dict[str, Any] = Field(default_factory=dict)
    start_lat: float
    start_lng: float
    current_minutes: int
    used_default_start: bool = False
    candidate_count: int = 0
    trace_id: str = ""


class LocationListResponse(BaseModel):
    count: int = 0
    locations: list[Location] = Field(default_factory=list)


class FareResponse(BaseModel):
    location_id: int
    fare: FareEstimate


class CrowdResponse(BaseModel):
    location_id: int
    timeline: list[TimelinePoint] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str = "ok"
