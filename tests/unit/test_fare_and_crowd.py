"""Tuk-tuk fare and crowd timeline tests."""

from __future__ import annotations

import pytest

from tripguide.domain.enums import LocationType
from tripguide.domain.models import Location
from tripguide.planner.crowd import crowd_heat_timeline, crowd_level, heat_level
from tripguide.planner.fare import estimate_tuktuk_fare


def test_short_trip_uses_low_rate():
    fare = estimate_tuktuk_fare(2.0)
    assert fare.total_usd == pytest.approx(2.5)
    assert fare.total_riel == 10300
    assert fare.distance_km == 2.0


def test_exactly_eight_km_still_uses_low_rate():
    fare = estimate_tuktuk_fare(8.0)
    assert fare.total_usd == pytest.approx(7.0)
    assert fare.total_riel == 28700


def test_long_trip_uses_high_rate():
    fare = estimate_tuktuk_fare(10.0)
    assert fare.total_usd == pytest.approx(11.0)
    assert fare.total_riel == 45100


def test_zero_distance_is_base_price():
    fare = estimate_tuktuk_fare(0.0)
    assert fare.total_usd == pytest.approx(1.0)
    assert fare.total_riel == 4100


def test_timeline_covers_six_to_twenty():
    location = Location(id=1, name="Angkor Wat", lat=13.4125, lng=103.867, type="Temple")
    timeline = crowd_heat_timeline(location)

    assert [point.hour for point in timeline] == list(range(6, 21))
    assert all(0.0 <= point.crowd <= 1.0 for point in timeline)
    assert all(0.0 <= point.heat <= 1.0 for point in timeline)


def test_crowd_adjustments():
    assert crowd_level(LocationType.TEMPLE, 6) == pytest.approx(0.46)
    assert crowd_level(LocationType.SHOPPING, 12) == pytest.approx(0.62)
    # Temples get the sunset rush but not the evening one.
    assert crowd_level(LocationType.TEMPLE, 18) == pytest.approx(0.74)
    assert crowd_level(LocationType.DINING, 18) == pytest.approx(0.89)
    assert crowd_level(LocationType.NATURE, 10) == pytest.approx(0.42)


def test_heat_peaks_early_afternoon():
    assert heat_level(13) == pytest.approx(0.94)
    assert heat_level(6) < heat_level(10) < heat_level(13)
    assert heat_level(20) < heat_level(16)
