"""Tuk-tuk fare estimate from straight-line distance."""

from __future__ import annotations

from tripguide.domain.models import FareEstimate
from tripguide.parsing.text_fields import round_half_up

BASE_PRICE_USD = 1.0
LOW_RATE_PER_KM = 0.75
HIGH_RATE_PER_KM = 1.0
LONG_TRIP_KM = 8.0
RIEL_PER_USD = 4100


def estimate_tuktuk_fare(distance_km: float) -> FareEstimate:
    rate = HIGH_RATE_PER_KM if distance_km > LONG_TRIP_KM else LOW_RATE_PER_KM
    total_usd = round(BASE_PRICE_USD + distance_km * rate, 2)
    # Riel is quoted to the nearest 100.
    total_riel = round_half_up(total_usd * RIEL_PER_USD / 100) * 100
    return FareEstimate(distance_km=distance_km, total_usd=total_usd, total_riel=total_riel)


__all__ = ["estimate_tuktuk_fare"]
