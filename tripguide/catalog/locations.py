"""Location catalog backed by a local JSON file."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from tripguide.config.settings import resolve_locations_file
from tripguide.domain.constants import NEARBY_RADIUS_KM
from tripguide.domain.enums import LocationType
from tripguide.domain.exceptions import LocationNotFound, UnknownLocationType
from tripguide.domain.models import Location
from tripguide.planner.distance import haversine_km
from tripguide.shared.exceptions import ToolError

_cache: dict[Path, list[Location]] = {}


def _read_file(path: Path) -> list[Location]:
    if not path.exists():
        raise ToolError("catalog", f"Data file not found: {path}")
    with open(path, encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise ToolError("catalog", f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(raw, list):
        raise ToolError("catalog", f"Expected a list of locations in {path}")
    try:
        return [Location.model_validate(item) for item in raw]
    except ValidationError as exc:
        raise ToolError("catalog", f"Invalid location record in {path}: {exc}") from exc


def load_locations(path: Optional[Path] = None) -> list[Location]:
    resolved = Path(path) if path is not None else resolve_locations_file()
    if resolved not in _cache:
        _cache[resolved] = _read_file(resolved)
    return list(_cache[resolved])


def clear_cache() -> None:
    _cache.clear()


def get_location(location_id: int, locations: Optional[Iterable[Location]] = None) -> Location:
    pool = load_locations() if locations is None else locations
    for location in pool:
        if location.id == location_id:
            return location
    raise LocationNotFound(location_id)


def _matches_query(location: Location, query: str) -> bool:
    if not query:
        return True
    haystack = (
        location.name,
        location.name_kh,
        location.desc,
        location.desc_kh,
        location.highlight,
        location.highlight_kh,
    )
    return any(query in value.lower() for value in haystack)


def filter_locations(
    locations: Iterable[Location],
    *,
    location_type: LocationType | str | None = None,
    query: str = "",
    near: Optional[tuple[float, float]] = None,
    radius_km: float = NEARBY_RADIUS_KM,
) -> list[Location]:
    """Type, text and proximity filter used before planning.

    ``location_type`` of ``None`` or ``"All"`` keeps every type. The proximity
    check is skipped when ``near`` is ``None`` (no position yet).
    """
    wanted: Optional[LocationType] = None
    if location_type is not None and str(location_type) != "All":
        try:
            wanted = LocationType(location_type)
        except ValueError as exc:
            raise UnknownLocationType(str(location_type)) from exc
    normalized_query = str(query or "").strip().lower()

    results: list[Location] = []
    for location in locations:
        if wanted is not None and location.type != wanted:
            continue
        if not _matches_query(location, normalized_query):
            continue
        if near is not None and haversine_km(near[0], near[1], location.lat, location.lng) > radius_km:
            continue
        results.append(location)
    return results


__all__ = ["clear_cache", "filter_locations", "get_location", "load_locations"]
