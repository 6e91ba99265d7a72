"""Runtime planner settings resolved from the environment."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from tripguide.domain.constants import CANDIDATE_POOL_LIMIT, DEFAULT_MAX_STOPS, SIEM_REAP_CENTER

_TRUTHY = {"1", "true", "yes", "on"}

DEFAULT_LOCATIONS_FILE = Path(__file__).resolve().parents[1] / "data" / "siem_reap_locations.json"


def _is_enabled(value: str | None) -> bool:
    return bool(value and value.strip().lower() in _TRUTHY)


def _int_env(name: str, default: int) -> int:
    raw = str(os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    raw = str(os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


class PlannerSettings(BaseModel):
    locations_file: Path = Field(default=DEFAULT_LOCATIONS_FILE)
    max_stops: int = Field(default=DEFAULT_MAX_STOPS, ge=0)
    pool_limit: int = Field(default=CANDIDATE_POOL_LIMIT, ge=0)
    strict_parsing: bool = Field(default=False)
    default_start_lat: float = Field(default=SIEM_REAP_CENTER[0], ge=-90.0, le=90.0)
    default_start_lng: float = Field(default=SIEM_REAP_CENTER[1], ge=-180.0, le=180.0)
    enable_docs: bool = Field(default=False)


def resolve_locations_file() -> Path:
    hint = str(os.getenv("TRIPGUIDE_LOCATIONS_FILE") or "").strip()
    return Path(hint) if hint else DEFAULT_LOCATIONS_FILE


def resolve_settings(*, strict_parsing: Optional[bool] = None) -> PlannerSettings:
    strict = _is_enabled(os.getenv("TRIPGUIDE_STRICT_PARSING")) if strict_parsing is None else strict_parsing
    return PlannerSettings(
        locations_file=resolve_locations_file(),
        max_stops=max(0, _int_env("TRIPGUIDE_MAX_STOPS", DEFAULT_MAX_STOPS)),
        pool_limit=max(0, _int_env("TRIPGUIDE_POOL_LIMIT", CANDIDATE_POOL_LIMIT)),
        strict_parsing=strict,
        default_start_lat=_float_env("TRIPGUIDE_START_LAT", SIEM_REAP_CENTER[0]),
        default_start_lng=_float_env("TRIPGUIDE_START_LNG", SIEM_REAP_CENTER[1]),
        enable_docs=_is_enabled(os.getenv("ENABLE_DOCS")),
    )


__all__ = ["PlannerSettings", "resolve_locations_file", "resolve_settings"]
