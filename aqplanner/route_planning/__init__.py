"""Mini README: Route planning subsystem for sensor survey missions.

Exports the planner facade plus each pipeline stage (cost model, nearest
insertion, local search, finalisation) so callers can run or test them on
their own.
"""

from .construction import nearest_insertion, seed_pair
from .cost_model import TargetCostModel
from .local_search import MoveResult, flip_move, optimise_tour, swap_move
from .models import Coordinate, ObstacleOracle, OpenAirspace, RoutePlanningError
from .planner import TourPlanner, WaypointPath, finalise_tour
from .tours import cyclic_neighbour, tour_length

__all__ = [
    "Coordinate",
    "MoveResult",
    "ObstacleOracle",
    "OpenAirspace",
    "RoutePlanningError",
    "TargetCostModel",
    "TourPlanner",
    "WaypointPath",
    "cyclic_neighbour",
    "finalise_tour",
    "flip_move",
    "nearest_insertion",
    "optimise_tour",
    "seed_pair",
    "swap_move",
    "tour_length",
]
