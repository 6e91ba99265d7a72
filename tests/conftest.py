"""pytest global fixtures: environment isolation."""

import pytest

from tripguide.catalog.locations import clear_cache


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Tests never read a developer's .env overrides."""
    for name in (
        "TRIPGUIDE_LOCATIONS_FILE",
        "TRIPGUIDE_MAX_STOPS",
        "TRIPGUIDE_POOL_LIMIT",
        "TRIPGUIDE_STRICT_PARSING",
        "TRIPGUIDE_START_LAT",
        "TRIPGUIDE_START_LNG",
        "ENABLE_DOCS",
    ):
        monkeypatch.delenv(name, raising=False)
    clear_cache()
    yield
    clear_cache()
