"""Mini README: GeoJSON helper utilities for aqplanner.

This module builds GeoJSON payloads from planned paths and answers simple
bounding-box questions. Keeping the logic isolated lets downstream tools
serialise plans without depending on the planning internals.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple


def linestring_feature(
    lon_lat_points: Iterable[Tuple[float, float]],
    properties: Optional[Dict[str, object]] = None,
) -> Dict:
    """Return a GeoJSON Feature wrapping the points as a LineString."""

    coordinates = [[float(lon), float(lat)] for lon, lat in lon_lat_points]
    if len(coordinates) < 2:
        raise ValueError("A LineString needs at least two positions")
    return {
        "type": "Feature",
        "geometry": {"type": "LineString", "coordinates": coordinates},
        "properties": dict(properties or {}),
    }


def bounds_contain(bounds: Tuple[float, float, float, float], latitude: float, longitude: float) -> bool:
    """Check whether a point lies inside (lat_min, lon_min, lat_max, lon_max), edges included."""

    lat_min, lon_min, lat_max, lon_max = bounds
    return lat_min <= latitude <= lat_max and lon_min <= longitude <= lon_max
