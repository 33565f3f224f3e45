"""Mini README: Sensor tour planning facade and path finalisation.

Structure:
    * WaypointPath - origin-anchored coordinates forming a closed flight.
    * finalise_tour - rotate an optimised cycle to the origin and map it to
      coordinates.
    * TourPlanner - builds the cost model once, then plans a path for each
      start coordinate it is given.

Typical use::

    planner = TourPlanner(sensor_positions, no_fly_oracle)
    path = planner.find_path(55.9444, -3.1878)
    feature = path.to_geojson()

Each ``find_path`` call binds its own origin row, so successive calls with
different starts never share intermediate state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..configuration import PlannerSettings, get_settings
from ..logging_utils import get_logger
from ..utils.geojson import bounds_contain, linestring_feature
from .construction import nearest_insertion
from .cost_model import CoordinateLike, TargetCostModel
from .local_search import optimise_tour
from .models import Coordinate, ObstacleOracle, RoutePlanningError
from .tours import cyclic_neighbour, require_permutation, require_square, tour_length

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class WaypointPath:
    """Ordered coordinates starting and ending at the origin."""

    waypoints: List[Coordinate] = field(default_factory=list)
    order: List[int] = field(default_factory=list)
    cost: float = 0.0
    description: str = "Sensor tour"

    @property
    def origin(self) -> int:
        return len(self.order) - 1

    @property
    def visiting_order(self) -> List[int]:
        """Target indices in the order they are visited."""

        return [vertex for vertex in self.order if vertex != self.origin]

    def total_length(self) -> float:
        """Straight-line length of the waypoint polyline in degrees."""

        return sum(
            current.distance_to(following)
            for current, following in zip(self.waypoints, self.waypoints[1:])
        )

    def to_geojson(self) -> Dict:
        """Return a GeoJSON LineString Feature for map overlays."""

        return linestring_feature(
            (waypoint.as_lon_lat() for waypoint in self.waypoints),
            {
                "description": self.description,
                "cost": self.cost,
                "visiting_order": self.visiting_order,
            },
        )


def finalise_tour(
    tour: Sequence[int],
    targets: Sequence[Coordinate],
    start: CoordinateLike,
    costs: np.ndarray,
) -> WaypointPath:
    """Anchor ``tour`` at the origin vertex and substitute coordinates."""

    start = Coordinate.coerce(start)
    origin = len(targets)
    if require_square(costs) != origin + 1:
        raise RoutePlanningError(
            f"Cost matrix of shape {costs.shape} does not cover {origin} targets and the origin"
        )
    require_permutation(tour, origin + 1)

    anchor = list(tour).index(origin)
    order = [cyclic_neighbour(tour, anchor, offset) for offset in range(len(tour))]
    waypoints = [start if vertex == origin else targets[vertex] for vertex in order]
    waypoints.append(start)
    return WaypointPath(waypoints=waypoints, order=order, cost=tour_length(order, costs))


class TourPlanner:
    """Plan closed sensor tours that avoid crossing no-fly zones."""

    def __init__(
        self,
        targets: Iterable[CoordinateLike],
        obstacles: Optional[ObstacleOracle] = None,
        *,
        settings: Optional[PlannerSettings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.cost_model = TargetCostModel.build(
            targets,
            obstacles,
            detour_cost=self.settings.detour_cost,
            crossing_policy=self.settings.crossing_policy,
        )
        LOGGER.debug(
            "Initialised TourPlanner with %s targets, passes=%s",
            len(self.cost_model.targets),
            self.settings.optimisation_passes,
        )

    @property
    def targets(self) -> Tuple[Coordinate, ...]:
        return self.cost_model.targets

    def find_path(self, start_latitude: float, start_longitude: float) -> WaypointPath:
        """Plan a closed tour from the given start over every target."""

        start = Coordinate.coerce((start_latitude, start_longitude))
        area = self.settings.confinement_area
        if area is not None and not bounds_contain(area, start.latitude, start.longitude):
            raise ValueError(f"Start {start} lies outside the confinement area {area}")

        costs = self.cost_model.bind_origin(start)
        tour = nearest_insertion(costs)
        optimise_tour(tour, costs, passes=self.settings.optimisation_passes)
        path = finalise_tour(tour, self.targets, start, costs)
        LOGGER.info(
            "Planned tour over %s targets from %s with cost %.6f",
            len(self.targets),
            start,
            path.cost,
        )
        return path
