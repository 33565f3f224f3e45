"""Mini README: Utility helper functions for aqplanner.

Currently exports GeoJSON helpers used when presenting planned paths and
checking start coordinates against the confinement area.
"""

from .geojson import bounds_contain, linestring_feature

__all__ = ["bounds_contain", "linestring_feature"]
