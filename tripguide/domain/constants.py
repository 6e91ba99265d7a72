"""Domain constants shared by deterministic logic."""

EARTH_RADIUS_KM = 6371.0

# Planner scoring. Changing any of these changes which stops get picked.
AVERAGE_SPEED_KMH = 25.0
SCHEDULE_PENALTY_DIVISOR = 70.0
TRAVEL_SCORE_DIVISOR = 45.0

DEFAULT_VISIT_MINUTES = 75
DEFAULT_IDEAL_MINUTES = 8 * 60

CANDIDATE_POOL_LIMIT = 20
DEFAULT_MAX_STOPS = 6

NEARBY_RADIUS_KM = 8.0

# Used as the starting point until the device reports a position.
SIEM_REAP_CENTER = (13.3633, 103.8564)

CAMBODIA_TIMEZONE = "Asia/Phnom_Penh"
