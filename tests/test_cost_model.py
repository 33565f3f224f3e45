"""Mini README: Tests for the target cost model.

Covers matrix symmetry, restricted-region pricing under both crossing
policies, origin binding and input validation.
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from aqplanner.configuration import CrossingPolicy
from aqplanner.route_planning import Coordinate, RoutePlanningError, TargetCostModel

SENSORS = [(0.0, 0.0), (1.0, 0.0), (0.5, 1.0), (2.0, 2.0), (0.0, 0.0)]


class PairOracle:
    """Reports a crossing for segments joining any of the listed coordinate pairs."""

    def __init__(self, blocked, evasion=0.25):
        self.blocked = {frozenset(pair) for pair in blocked}
        self.evasion = evasion
        self.calls = []

    def crosses_restricted_area(self, start, end):
        self.calls.append((start, end))
        return frozenset({start.as_lon_lat()[::-1], end.as_lon_lat()[::-1]}) in self.blocked

    def evasion_cost(self, start, end):
        return self.evasion


class CrossingOnlyOracle:
    def crosses_restricted_area(self, start, end):
        return True


def test_matrix_is_symmetric_with_zero_diagonal() -> None:
    model = TargetCostModel.build(SENSORS)
    costs = model.bind_origin((0.3, 0.3))

    assert costs.shape == (6, 6)
    assert np.array_equal(costs, costs.T)
    assert np.all(np.diag(costs) == 0.0)
    assert costs[0, 1] == pytest.approx(1.0)
    # coincident sensors are allowed and simply cost nothing
    assert costs[0, 4] == 0.0


def test_crossing_pair_uses_detour_sentinel() -> None:
    oracle = PairOracle([((0.0, 0.0), (1.0, 0.0))])
    model = TargetCostModel.build(SENSORS[:3], oracle, detour_cost=500.0)

    assert model.costs[0, 1] == 500.0
    assert model.costs[1, 0] == 500.0
    assert model.costs[0, 2] == pytest.approx(math.hypot(0.5, 1.0))


def test_evasion_policy_adds_evasion_cost() -> None:
    oracle = PairOracle([((0.0, 0.0), (1.0, 0.0))], evasion=0.25)
    model = TargetCostModel.build(SENSORS[:3], oracle, crossing_policy=CrossingPolicy.EVASION)

    assert model.costs[0, 1] == pytest.approx(1.25)
    assert model.costs[1, 2] == pytest.approx(math.hypot(0.5, 1.0))


def test_evasion_policy_requires_evasion_cost() -> None:
    with pytest.raises(ValueError):
        TargetCostModel.build(SENSORS[:3], CrossingOnlyOracle(), crossing_policy="evasion")


def test_negative_evasion_cost_is_rejected() -> None:
    oracle = PairOracle([((0.0, 0.0), (1.0, 0.0))], evasion=-1.0)
    with pytest.raises(RoutePlanningError):
        TargetCostModel.build(SENSORS[:3], oracle, crossing_policy=CrossingPolicy.EVASION)


def test_origin_edges_skip_the_oracle() -> None:
    oracle = PairOracle([])
    model = TargetCostModel.build(SENSORS[:3], oracle)
    calls_after_build = len(oracle.calls)

    costs = model.bind_origin((3.0, 4.0))

    assert len(oracle.calls) == calls_after_build == 3
    assert costs[3, 0] == pytest.approx(5.0)
    assert costs[0, 3] == pytest.approx(5.0)


def test_rebinding_origin_does_not_leak_previous_start() -> None:
    model = TargetCostModel.build(SENSORS[:3])
    first = model.bind_origin((0.0, 0.0))
    second = model.bind_origin((1.0, 1.0))

    assert first[3, 1] == pytest.approx(1.0)
    assert second[3, 1] == pytest.approx(1.0)
    assert second[3, 0] == pytest.approx(math.sqrt(2.0))
    assert first[3, 0] == 0.0
    assert np.array_equal(second, model.bind_origin((1.0, 1.0)))


def test_matrices_are_read_only() -> None:
    model = TargetCostModel.build(SENSORS[:3])
    bound = model.bind_origin((0.0, 0.0))

    with pytest.raises(ValueError):
        model.costs[0, 1] = 9.0
    with pytest.raises(ValueError):
        bound[0, 3] = 9.0


def test_single_target_gives_trivial_block() -> None:
    model = TargetCostModel.build([(0.5, 0.5)])

    assert model.costs.shape == (1, 1)
    assert model.origin == 1


@pytest.mark.parametrize(
    "targets",
    [
        [],
        [(float("nan"), 0.0)],
        [(91.0, 0.0)],
        [(0.0, 181.0)],
        [(1.0, 2.0, 3.0)],
        ["not a coordinate"],
        ["12"],
        [b"12"],
        [12],
        [{"lat": 1.0, "lon": 2.0}],
    ],
)
def test_invalid_targets_are_rejected(targets) -> None:
    with pytest.raises(ValueError):
        TargetCostModel.build(targets)


def test_mismatched_block_is_a_precondition_error() -> None:
    with pytest.raises(RoutePlanningError):
        TargetCostModel(targets=(Coordinate(0.0, 0.0),), costs=np.zeros((2, 2)))


def test_detour_cost_must_exceed_direct_distances() -> None:
    with pytest.raises(ValueError):
        TargetCostModel.build([(0.0, 0.0), (0.0, 1.0)], CrossingOnlyOracle(), detour_cost=0.5)
    with pytest.raises(ValueError):
        TargetCostModel.build([(0.0, 0.0), (0.0, 1.0)], detour_cost=1.0)

    model = TargetCostModel.build([(0.0, 0.0), (0.0, 1.0)], CrossingOnlyOracle(), detour_cost=1.5)
    assert model.costs[0, 1] > Coordinate(0.0, 0.0).distance_to(Coordinate(0.0, 1.0))


def test_models_compare_by_identity() -> None:
    model = TargetCostModel.build(SENSORS[:3])
    twin = TargetCostModel.build(SENSORS[:3])

    assert model == model
    assert model != twin
    assert len({model, twin}) == 2
