"""Mini README: Nearest insertion tour construction.

Structure:
    * seed_pair - pick the starting pair of vertices.
    * nearest_insertion - grow a cycle from the seed pair.

The scan order is fixed (row-major over vertex identifiers) and every
comparison is strict, so the first candidate reaching a minimum wins and the
result is fully deterministic for a given matrix.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from ..logging_utils import get_logger
from .tours import cyclic_neighbour, require_square

LOGGER = get_logger(__name__)


def seed_pair(costs: np.ndarray) -> Tuple[int, int]:
    """Return the cheapest pair found by a strict row-major scan.

    The pair (0, 1) is the starting best and rows are scanned from 1, so pairs
    (0, j) with ``j > 1`` never replace it.
    """

    size = costs.shape[0]
    best = costs[0, 1]
    seed = (0, 1)
    for i in range(1, size):
        for j in range(i + 1, size):
            if costs[i, j] < best:
                best = costs[i, j]
                seed = (i, j)
    return seed


def nearest_insertion(costs: np.ndarray) -> List[int]:
    """Build an initial cycle visiting every vertex of ``costs`` exactly once.

    Args:
        costs: Square, symmetric matrix with the origin row already bound.

    Returns:
        A list of vertex identifiers interpreted cyclically.
    """

    size = require_square(costs)
    if size == 1:
        return [0]

    tour = list(seed_pair(costs))
    unused = [vertex for vertex in range(size) if vertex not in tour]
    LOGGER.debug("Nearest insertion seeded with pair %s", tour)

    while unused:
        best = costs[tour[0], unused[0]]
        position, candidate = 0, unused[0]
        for index, vertex in enumerate(tour):
            for free in unused:
                if costs[vertex, free] < best:
                    best = costs[vertex, free]
                    position, candidate = index, free

        # attach on whichever side of the anchor is cheaper; ties go after
        before = costs[cyclic_neighbour(tour, position, -1), candidate]
        after = costs[cyclic_neighbour(tour, position, 1), candidate]
        if before < after:
            tour.insert(position, candidate)
        else:
            tour.insert(position + 1, candidate)
        unused.remove(candidate)

    return tour
