"""Domain enums."""

from enum import Enum


class LocationType(str, Enum):
    TEMPLE = "Temple"
    NATURE = "Nature"
    DINING = "Dining"
    SHOPPING = "Shopping"
    MUSEUM = "Museum"
    CULTURE = "Culture"


class LocationMood(str, Enum):
    EPIC = "Epic"
    ADVENTUROUS = "Adventurous"
    PEACEFUL = "Peaceful"
    LOCAL_LIFE = "Local Life"
    CULTURAL_NIGHT = "Cultural Night"


class DayPhase(str, Enum):
    DAY = "day"
    GOLDEN = "golden"
    NIGHT = "night"
