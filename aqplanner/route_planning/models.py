"""Mini README: Shared value types for sensor tour planning.

Structure:
    * Coordinate - immutable latitude/longitude pair with planar distance.
    * ObstacleOracle - protocol for the external no-fly crossing capability.
    * OpenAirspace - oracle that never reports a crossing.
    * RoutePlanningError - raised when a planning stage receives stale or
      mismatched state.

Distances are measured in degree space with ``math.hypot``. Over the small
areas a sensor survey covers this tracks true ground distance closely enough
to rank candidate tours.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, Tuple, Union

import numpy as np


class RoutePlanningError(RuntimeError):
    """A planning stage was invoked on state that does not belong to it."""


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Single latitude/longitude position."""

    latitude: float
    longitude: float

    @classmethod
    def coerce(cls, value: Union["Coordinate", Sequence[float]]) -> "Coordinate":
        """Build a validated coordinate from a ``Coordinate`` or ``(lat, lon)`` pair."""

        if isinstance(value, Coordinate):
            latitude, longitude = value.latitude, value.longitude
        elif isinstance(value, (str, bytes, bytearray)) or not isinstance(value, (Sequence, np.ndarray)):
            raise ValueError(f"Malformed coordinate: {value!r}")
        else:
            try:
                latitude, longitude = (float(part) for part in value)
            except (TypeError, ValueError) as error:
                raise ValueError(f"Malformed coordinate: {value!r}") from error

        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            raise ValueError(f"Coordinate must be finite, got ({latitude}, {longitude})")
        if not -90.0 <= latitude <= 90.0:
            raise ValueError(f"Latitude {latitude} outside [-90, 90]")
        if not -180.0 <= longitude <= 180.0:
            raise ValueError(f"Longitude {longitude} outside [-180, 180]")
        return cls(latitude=latitude, longitude=longitude)

    def distance_to(self, other: "Coordinate") -> float:
        """Planar Euclidean distance in degrees."""

        return math.hypot(self.latitude - other.latitude, self.longitude - other.longitude)

    def as_lon_lat(self) -> Tuple[float, float]:
        """Return the GeoJSON ordering of this position."""

        return (self.longitude, self.latitude)


class ObstacleOracle(Protocol):
    """Answers whether a straight segment crosses any restricted region.

    Implementations may additionally expose
    ``evasion_cost(start, end) -> float``, the extra distance needed to go
    around whatever the segment crosses. It is only consulted under the
    ``evasion`` crossing policy.
    """

    def crosses_restricted_area(self, start: Coordinate, end: Coordinate) -> bool:
        ...


class OpenAirspace:
    """Oracle used when no restricted regions are known."""

    def crosses_restricted_area(self, start: Coordinate, end: Coordinate) -> bool:
        return False

    def evasion_cost(self, start: Coordinate, end: Coordinate) -> float:
        return 0.0
