"""Pydantic domain models."""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from tripguide.domain.enums import DayPhase, LocationMood, LocationType


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    name_kh: str = Field(default="", validation_alias=AliasChoices("name_kh", "nameKh"))
    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)
    type: LocationType = LocationType.CULTURE
    desc: str = ""
    desc_kh: str = Field(default="", validation_alias=AliasChoices("desc_kh", "descKh"))
    duration: str = ""
    best_time: str = Field(default="", validation_alias=AliasChoices("best_time", "bestTime"))
    budget: str = ""
    highlight: str = ""
    highlight_kh: str = Field(default="", validation_alias=AliasChoices("highlight_kh", "highlightKh"))
    mood: Optional[LocationMood] = None
    rating: Optional[float] = None


class PlannedStop(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: Location
    travel_km: float = 0.0
    travel_minutes: int = 0
    visit_minutes: int = 0


class DayPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    stops: list[PlannedStop] = Field(default_factory=list)
    total_travel_km: float = 0.0
    total_travel_minutes: int = 0
    total_visit_minutes: int = 0

    @property
    def total_minutes(self) -> int:
        return self.total_travel_minutes + self.total_visit_minutes

    @classmethod
    def empty(cls) -> "DayPlan":
        return cls()


class FareEstimate(BaseModel):
    distance_km: float
    total_usd: float
    total_riel: int


class TimelinePoint(BaseModel):
    hour: int
    crowd: float
    heat: float


class TimeSnapshot(BaseModel):
    hour: int
    minute: int
    total_minutes: int
    is_golden_hour: bool = False
    phase: DayPhase = DayPhase.DAY


class ErrorResponse(BaseModel):
    error: bool = True
    code: str = "UNKNOWN"
    message: str = ""
    details: list[str] = Field(default_factory=list)
