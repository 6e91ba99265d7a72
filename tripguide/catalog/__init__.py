"""Location catalog."""

from tripguide.catalog.locations import clear_cache, filter_locations, get_location, load_locations

__all__ = ["clear_cache", "filter_locations", "get_location", "load_locations"]
