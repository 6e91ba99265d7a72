"""Day-plan presentation tests."""

from __future__ import annotations

import pytest

from tripguide.domain.models import DayPlan, Location, PlannedStop
from tripguide.services.itinerary_presenter import (
    NO_STOPS_MESSAGE,
    format_distance_km,
    format_minutes,
    present_day_plan,
    render_day_plan_text,
)


def _plan() -> DayPlan:
    wat = Location(id=1, name="Angkor Wat", lat=13.4125, lng=103.867, type="Temple")
    bayon = Location(id=2, name="Bayon Temple", lat=13.4412, lng=103.859, type="Temple")
    stops = [
        PlannedStop(location=wat, travel_km=6.5, travel_minutes=16, visit_minutes=150),
        PlannedStop(location=bayon, travel_km=0.4, travel_minutes=1, visit_minutes=90),
    ]
    return DayPlan(stops=stops, total_travel_km=6.9, total_travel_minutes=17, total_visit_minutes=240)


@pytest.mark.parametrize(
    ("km", "expected"),
    [(0.4567, "457m"), (0.0, "0m"), (1.0, "1.00km"), (2.5, "2.50km")],
)
def test_format_distance_km(km, expected):
    assert format_distance_km(km) == expected


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [(0, "0m"), (45, "45m"), (60, "1h 0m"), (135, "2h 15m")],
)
def test_format_minutes(minutes, expected):
    assert format_minutes(minutes) == expected


def test_present_day_plan_rows_and_total():
    payload = present_day_plan(_plan())

    assert [row["order"] for row in payload["stops"]] == [1, 2]
    first = payload["stops"][0]
    assert first["location_id"] == 1
    assert first["name"] == "Angkor Wat"
    assert first["type"] == "Temple"
    assert first["travel"] == "6.50km • 16m"
    assert first["visit"] == "2h 30m"
    assert payload["stops"][1]["travel"] == "400m • 1m"
    assert payload["total"] == "6.90km • 4h 17m"


def test_present_empty_plan():
    assert present_day_plan(DayPlan.empty()) == {"stops": [], "message": NO_STOPS_MESSAGE}


def test_render_text():
    text = render_day_plan_text(_plan())
    assert text.splitlines()[0] == "1. Angkor Wat"
    assert text.endswith("Total: 6.90km • 4h 17m")
    assert render_day_plan_text(DayPlan.empty()) == NO_STOPS_MESSAGE
