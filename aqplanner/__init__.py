"""Mini README: Core package initializer for aqplanner.

aqplanner plans closed flight tours over air-quality sensors while pricing
segments that cross no-fly zones. This module re-exports the planner facade
and the logging/configuration helpers so scripts can do everything from a
single import.
"""

from .configuration import PlannerSettings, get_settings
from .logging_utils import get_logger
from .route_planning import Coordinate, TourPlanner, WaypointPath

__all__ = [
    "Coordinate",
    "PlannerSettings",
    "TourPlanner",
    "WaypointPath",
    "get_logger",
    "get_settings",
]
