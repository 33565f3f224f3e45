"""Mini README: Tour primitives shared by the construction and search stages.

Structure:
    * require_square - validate a cost matrix and return its vertex count.
    * require_permutation - validate that a tour covers every vertex once.
    * cyclic_neighbour - the only place tour positions wrap around.
    * tour_length - total cost of a tour read as a closed cycle.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .models import RoutePlanningError


def require_square(costs: np.ndarray) -> int:
    """Return the vertex count of ``costs`` or fail if it is not square."""

    if costs.ndim != 2 or costs.shape[0] != costs.shape[1] or costs.shape[0] == 0:
        raise RoutePlanningError(f"Expected a non-empty square cost matrix, got shape {costs.shape}")
    return int(costs.shape[0])


def require_permutation(tour: Sequence[int], size: int) -> None:
    """Fail unless ``tour`` holds each of ``0..size-1`` exactly once."""

    if len(tour) != size or sorted(tour) != list(range(size)):
        raise RoutePlanningError(f"Tour {list(tour)} is not a permutation of {size} vertices")


def cyclic_neighbour(tour: Sequence[int], position: int, offset: int) -> int:
    """Return the vertex ``offset`` places away from ``position``, wrapping."""

    return tour[(position + offset) % len(tour)]


def tour_length(tour: Sequence[int], costs: np.ndarray) -> float:
    """Sum the edge costs of ``tour`` including the closing edge."""

    order = np.asarray(tour, dtype=np.intp)
    return float(costs[order, np.roll(order, -1)].sum())
