"""Mini README: Flip and swap local search over a closed tour.

Structure:
    * MoveResult - outcome of evaluating a single move.
    * flip_move - exchange two consecutive vertices when the four-vertex
      window through them gets shorter.
    * swap_move - exchange the vertices after two positions when the whole
      cycle gets shorter.
    * optimise_tour - fixed number of first-improvement sweeps applying both.

Both move functions are pure and return a fresh candidate list. Only
``optimise_tour`` mutates a tour, and it does so in place so callers holding
the list see the optimised order.

The swap move prices the full cycle for every candidate, which makes a sweep
cubic in the vertex count. That is fine for survey-sized inputs (tens of
sensors) and is kept as-is so accepted moves stay identical.
"""

from __future__ import annotations

from typing import List, NamedTuple, Sequence

import numpy as np

from ..logging_utils import get_logger
from .tours import cyclic_neighbour, require_permutation, require_square, tour_length

LOGGER = get_logger(__name__)

# every ordering of three or fewer vertices describes the same cycle
_MIN_OPTIMISABLE = 4


class MoveResult(NamedTuple):
    """Whether a move improved its objective, and the candidate tour."""

    improved: bool
    tour: List[int]


def flip_move(tour: Sequence[int], costs: np.ndarray, position: int) -> MoveResult:
    """Try visiting ``tour[position + 1]`` before ``tour[position]``.

    Compares ``a-b-c-d`` against ``a-c-b-d`` where ``a..d`` are the vertices
    at ``position - 1 .. position + 2``.
    """

    a = cyclic_neighbour(tour, position, -1)
    b = cyclic_neighbour(tour, position, 0)
    c = cyclic_neighbour(tour, position, 1)
    d = cyclic_neighbour(tour, position, 2)

    current = costs[a, b] + costs[b, c] + costs[c, d]
    flipped = costs[c, b] + costs[a, c] + costs[b, d]

    candidate = list(tour)
    if flipped < current:
        candidate[position % len(tour)] = c
        candidate[(position + 1) % len(tour)] = b
        return MoveResult(True, candidate)
    return MoveResult(False, candidate)


def swap_move(tour: Sequence[int], costs: np.ndarray, first: int, second: int) -> MoveResult:
    """Try exchanging the vertices following ``first`` and ``second``."""

    size = len(tour)
    left, right = (first + 1) % size, (second + 1) % size

    candidate = list(tour)
    candidate[left] = cyclic_neighbour(tour, second, 1)
    candidate[right] = cyclic_neighbour(tour, first, 1)
    if tour_length(candidate, costs) < tour_length(tour, costs):
        return MoveResult(True, candidate)
    return MoveResult(False, list(tour))


def optimise_tour(tour: List[int], costs: np.ndarray, *, passes: int = 2) -> List[int]:
    """Improve ``tour`` in place with first-improvement flip and swap moves."""

    size = require_square(costs)
    require_permutation(tour, size)
    if passes < 1:
        raise ValueError("At least one optimisation pass is required")
    if size < _MIN_OPTIMISABLE:
        return tour

    initial = tour_length(tour, costs)
    accepted = 0
    for _ in range(passes):
        for i in range(size):
            for j in range(size):
                if i == j:
                    continue
                flip = flip_move(tour, costs, i)
                if flip.improved:
                    tour[:] = flip.tour
                    accepted += 1
                swap = swap_move(tour, costs, i, j)
                if swap.improved:
                    tour[:] = swap.tour
                    accepted += 1

    LOGGER.debug(
        "Local search accepted %s moves, length %.6f -> %.6f",
        accepted,
        initial,
        tour_length(tour, costs),
    )
    return tour
