"""Configuration package."""

from tripguide.config.settings import PlannerSettings, resolve_locations_file, resolve_settings

__all__ = ["PlannerSettings", "resolve_locations_file", "resolve_settings"]
