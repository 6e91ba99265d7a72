"""Greedy day-plan builder tests."""

from __future__ import annotations

import pytest

from tripguide.domain.exceptions import UnparseableFieldError
from tripguide.domain.models import DayPlan, Location
from tripguide.planner.day_plan import build_day_plan, score_candidate

START_LAT = 13.0
START_LNG = 103.0
# Latitude delta that is ~1 km along a meridian.
ONE_KM_LAT = 1.0 / 111.19493


def _loc(
    lid: int,
    *,
    lat: float = START_LAT,
    lng: float = START_LNG,
    best_time: str = "8:00 AM",
    duration: str = "1 hour",
) -> Location:
    return Location(
        id=lid,
        name=f"place-{lid}",
        lat=lat,
        lng=lng,
        type="Temple",
        best_time=best_time,
        duration=duration,
    )


def test_empty_candidates_give_empty_plan():
    plan = build_day_plan([], 360, START_LAT, START_LNG)

    assert plan == DayPlan.empty()
    assert plan.stops == []
    assert plan.total_travel_km == 0.0
    assert plan.total_travel_minutes == 0
    assert plan.total_visit_minutes == 0
    assert plan.total_minutes == 0


def test_zero_max_stops_gives_empty_plan():
    plan = build_day_plan([_loc(1)], 360, START_LAT, START_LNG, max_stops=0)
    assert plan.stops == []


def test_morning_place_is_chosen_before_evening_place():
    a = _loc(1, lat=START_LAT + ONE_KM_LAT, best_time="6:00 AM", duration="1 hour")
    b = _loc(2, lat=START_LAT - ONE_KM_LAT, best_time="6:00 PM", duration="2 hours")

    plan = build_day_plan([b, a], 360, START_LAT, START_LNG)

    assert [stop.location.id for stop in plan.stops] == [1, 2]
    first, second = plan.stops
    assert first.travel_km == pytest.approx(1.0, abs=0.01)
    assert first.travel_minutes == 2
    assert first.visit_minutes == 60
    assert second.travel_km == pytest.approx(2.0, abs=0.02)
    assert second.travel_minutes == 5
    assert second.visit_minutes == 120


def test_rolling_clock_drives_the_order():
    north = _loc(1, lat=START_LAT + ONE_KM_LAT / 2, best_time="5:00 AM", duration="2 hours")
    east = _loc(2, lng=START_LNG + ONE_KM_LAT / 2, best_time="7:00 AM", duration="2 hours")
    south = _loc(3, lat=START_LAT - ONE_KM_LAT / 2, best_time="9:00 AM", duration="2 hours")

    plan = build_day_plan([south, east, north], 300, START_LAT, START_LNG)

    assert [stop.location.id for stop in plan.stops] == [1, 2, 3]


def test_ties_keep_input_order():
    first = _loc(7, lat=START_LAT + ONE_KM_LAT)
    twin = _loc(3, lat=START_LAT + ONE_KM_LAT)

    plan = build_day_plan([first, twin], 480, START_LAT, START_LNG, max_stops=1)

    assert [stop.location.id for stop in plan.stops] == [7]


def test_never_selects_a_location_twice():
    locations = [_loc(i, lat=START_LAT + i * 0.01, best_time=f"{5 + i}:00 AM") for i in range(1, 7)]

    plan = build_day_plan(locations, 300, START_LAT, START_LNG, max_stops=6)

    ids = [stop.location.id for stop in plan.stops]
    assert len(ids) == 6
    assert len(set(ids)) == len(ids)


def test_duplicate_ids_end_the_plan_early():
    plan = build_day_plan([_loc(1), _loc(1, lat=START_LAT + 0.01)], 480, START_LAT, START_LNG)
    assert len(plan.stops) == 1


def test_stop_count_is_capped_by_max_stops_and_candidates():
    locations = [_loc(i, lat=START_LAT + i * 0.005) for i in range(10)]

    assert len(build_day_plan(locations, 480, START_LAT, START_LNG).stops) == 6
    assert len(build_day_plan(locations, 480, START_LAT, START_LNG, max_stops=3).stops) == 3
    assert len(build_day_plan(locations[:2], 480, START_LAT, START_LNG, max_stops=6).stops) == 2


def test_only_first_twenty_candidates_are_considered():
    far = [_loc(i, lat=START_LAT + 0.5 + i * 0.01, best_time="11:00 PM") for i in range(20)]
    # Perfect candidate sitting on the start point, but outside the pool.
    ideal = _loc(99, best_time="8:00 AM")

    plan = build_day_plan([*far, ideal], 480, START_LAT, START_LNG, max_stops=30)

    ids = {stop.location.id for stop in plan.stops}
    assert len(plan.stops) == 20
    assert 99 not in ids


def test_pool_limit_is_tunable():
    locations = [_loc(i, lat=START_LAT + i * 0.005) for i in range(10)]
    plan = build_day_plan(locations, 480, START_LAT, START_LNG, max_stops=10, pool_limit=4)
    assert {stop.location.id for stop in plan.stops} == {0, 1, 2, 3}


def test_totals_equal_sum_of_stops():
    locations = [
        _loc(i, lat=START_LAT + i * 0.013, lng=START_LNG - i * 0.007, best_time=f"{6 + i}:30 AM", duration="45 mins")
        for i in range(1, 6)
    ]

    plan = build_day_plan(locations, 360, START_LAT, START_LNG)

    assert plan.total_travel_km == pytest.approx(sum(stop.travel_km for stop in plan.stops))
    assert plan.total_travel_minutes == sum(stop.travel_minutes for stop in plan.stops)
    assert plan.total_visit_minutes == sum(stop.visit_minutes for stop in plan.stops)
    assert plan.total_visit_minutes == 45 * len(plan.stops)


def test_unparseable_fields_fall_back_to_defaults():
    loc = _loc(1, lat=START_LAT + ONE_KM_LAT, best_time="whenever", duration="a while")

    plan = build_day_plan([loc], 480, START_LAT, START_LNG)

    assert plan.stops[0].visit_minutes == 75


def test_strict_mode_surfaces_bad_catalog_text():
    loc = _loc(1, best_time="whenever")
    with pytest.raises(UnparseableFieldError):
        build_day_plan([loc], 480, START_LAT, START_LNG, strict=True)


def test_does_not_mutate_input():
    locations = [_loc(2, lat=START_LAT + 0.01), _loc(1, lat=START_LAT + 0.02)]
    snapshot = list(locations)

    build_day_plan(locations, 480, START_LAT, START_LNG)

    assert locations == snapshot


def test_score_candidate_formula():
    # 1 km away, 70 minutes off the ideal time: 1 + 1 + 2.4 / 45
    assert score_candidate(1.0, 550, 480) == pytest.approx(2.0 + 2.4 / 45)
    assert score_candidate(0.0, 480, 480) == 0.0
