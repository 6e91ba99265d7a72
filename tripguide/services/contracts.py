"""Application request/response contracts."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from tripguide.domain.models import DayPlan


class DayPlanRequest(BaseModel):
    lat: Optional[float] = Field(default=None, ge=-90.0, le=90.0)
    lng: Optional[float] = Field(default=None, ge=-180.0, le=180.0)
    current_minutes: Optional[int] = Field(default=None, ge=0, le=24 * 60 - 1)
    location_type: Optional[str] = None
    query: str = Field(default="", max_length=200)
    nearby_only: bool = False
    location_ids: Optional[list[int]] = None
    max_stops: Optional[int] = Field(default=None, ge=0, le=20)
    strict: Optional[bool] = None


class DayPlanResult(BaseModel):
    plan: DayPlan
    presented: dict[str, Any] = Field(default_factory=dict)
    start_lat: float
    start_lng: float
    current_minutes: int
    used_default_start: bool = False
    candidate_count: int = 0
    trace_id: str = ""


__all__ = ["DayPlanRequest", "DayPlanResult"]
