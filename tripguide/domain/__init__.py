"""Domain package exports."""

from tripguide.domain.constants import (
    AVERAGE_SPEED_KMH,
    CANDIDATE_POOL_LIMIT,
    DEFAULT_IDEAL_MINUTES,
    DEFAULT_MAX_STOPS,
    DEFAULT_VISIT_MINUTES,
    SCHEDULE_PENALTY_DIVISOR,
    TRAVEL_SCORE_DIVISOR,
)
from tripguide.domain.enums import DayPhase, LocationMood, LocationType
from tripguide.domain.exceptions import (
    DomainError,
    InvalidTimeOfDay,
    LocationNotFound,
    UnknownLocationType,
    UnparseableFieldError,
)
from tripguide.domain.models import (
    DayPlan,
    ErrorResponse,
    FareEstimate,
    Location,
    PlannedStop,
    TimelinePoint,
    TimeSnapshot,
)

__all__ = [
    "DayPlan",
    "DayPhase",
    "DomainError",
    "ErrorResponse",
    "InvalidTimeOfDay",
    "FareEstimate",
    "Location",
    "LocationMood",
    "LocationNotFound",
    "LocationType",
    "PlannedStop",
    "TimelinePoint",
    "TimeSnapshot",
    "UnknownLocationType",
    "UnparseableFieldError",
    "AVERAGE_SPEED_KMH",
    "CANDIDATE_POOL_LIMIT",
    "DEFAULT_IDEAL_MINUTES",
    "DEFAULT_MAX_STOPS",
    "DEFAULT_VISIT_MINUTES",
    "SCHEDULE_PENALTY_DIVISOR",
    "TRAVEL_SCORE_DIVISOR",
]
