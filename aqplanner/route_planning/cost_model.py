"""Mini README: Pairwise cost model over sensor targets and the origin.

Structure:
    * TargetCostModel - frozen target list plus its read-only target-target
      cost block.
    * TargetCostModel.build - prices every target pair, consulting the
      obstacle oracle.
    * TargetCostModel.bind_origin - returns a fresh (N+1)x(N+1) matrix with
      the origin row/column appended for a given start coordinate.

Vertex ``N`` (one past the last target) always denotes the origin. Origin
edges use raw distance and never consult the oracle; only target pairs are
checked for restricted-region crossings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np

from ..configuration import CrossingPolicy
from ..logging_utils import get_logger
from .models import Coordinate, ObstacleOracle, OpenAirspace, RoutePlanningError

LOGGER = get_logger(__name__)

CoordinateLike = Union[Coordinate, Sequence[float]]


def coerce_targets(targets: Iterable[CoordinateLike]) -> Tuple[Coordinate, ...]:
    """Validate targets, rejecting an empty list before any matrix work."""

    coerced = tuple(Coordinate.coerce(target) for target in targets)
    if not coerced:
        raise ValueError("At least one target is required")
    return coerced


def _segment_cost(
    start: Coordinate,
    end: Coordinate,
    obstacles: ObstacleOracle,
    *,
    detour_cost: float,
    crossing_policy: CrossingPolicy,
) -> Tuple[float, bool]:
    distance = start.distance_to(end)
    if not obstacles.crosses_restricted_area(start, end):
        return distance, False

    if crossing_policy is CrossingPolicy.EVASION:
        evasion = float(obstacles.evasion_cost(start, end))  # type: ignore[attr-defined]
        if evasion < 0:
            raise RoutePlanningError(f"Negative evasion cost {evasion} between {start} and {end}")
        LOGGER.debug("Segment %s -> %s crosses a no-fly zone, evasion %.6f", start, end, evasion)
        return distance + evasion, True

    LOGGER.debug("Segment %s -> %s crosses a no-fly zone, using detour cost", start, end)
    return detour_cost, True


@dataclass(frozen=True, slots=True, eq=False)
class TargetCostModel:
    """Targets and their symmetric target-target cost block."""

    targets: Tuple[Coordinate, ...]
    costs: np.ndarray

    def __post_init__(self) -> None:
        size = len(self.targets)
        if self.costs.shape != (size, size):
            raise RoutePlanningError(
                f"Cost block of shape {self.costs.shape} does not match {size} targets"
            )

    @classmethod
    def build(
        cls,
        targets: Iterable[CoordinateLike],
        obstacles: Optional[ObstacleOracle] = None,
        *,
        detour_cost: float = 1.0e6,
        crossing_policy: CrossingPolicy = CrossingPolicy.SENTINEL,
    ) -> "TargetCostModel":
        """Price every unordered target pair once and mirror it."""

        frozen_targets = coerce_targets(targets)
        if obstacles is None:
            obstacles = OpenAirspace()
        crossing_policy = CrossingPolicy(crossing_policy)
        if crossing_policy is CrossingPolicy.EVASION and not callable(
            getattr(obstacles, "evasion_cost", None)
        ):
            raise ValueError("The evasion crossing policy needs an oracle exposing evasion_cost()")

        size = len(frozen_targets)
        if crossing_policy is CrossingPolicy.SENTINEL:
            longest = max(
                (first.distance_to(second) for first in frozen_targets for second in frozen_targets),
                default=0.0,
            )
            if not detour_cost > longest:
                raise ValueError(
                    f"Detour cost {detour_cost} must exceed the longest direct segment {longest:.6f}"
                )

        costs = np.zeros((size, size), dtype=np.float64)
        crossings = 0
        for i in range(size):
            for j in range(i):
                cost, crossed = _segment_cost(
                    frozen_targets[i],
                    frozen_targets[j],
                    obstacles,
                    detour_cost=detour_cost,
                    crossing_policy=crossing_policy,
                )
                crossings += crossed
                costs[i, j] = costs[j, i] = cost
        costs.setflags(write=False)

        LOGGER.info(
            "Built cost model for %s targets (%s crossing pairs, policy=%s)",
            size,
            crossings,
            crossing_policy.value,
        )
        return cls(targets=frozen_targets, costs=costs)

    @property
    def origin(self) -> int:
        """Vertex identifier reserved for the start coordinate."""

        return len(self.targets)

    def bind_origin(self, start: CoordinateLike) -> np.ndarray:
        """Return a new read-only matrix including the origin row and column."""

        start = Coordinate.coerce(start)
        size = len(self.targets)

        bound = np.zeros((size + 1, size + 1), dtype=np.float64)
        bound[:size, :size] = self.costs
        for index, target in enumerate(self.targets):
            bound[size, index] = bound[index, size] = start.distance_to(target)
        bound.setflags(write=False)
        LOGGER.debug("Bound origin %s to cost model of %s targets", start, size)
        return bound
