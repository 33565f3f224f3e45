"""Mini README: Centralised configuration models and helpers for aqplanner.

Structure:
    * CrossingPolicy - enum selecting how restricted-region crossings are priced.
    * PlannerSettings - Pydantic model describing planner tuning knobs.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``AQPLANNER_*`` environment variables (or a
    local ``.env`` file). Tests and embedding applications may instead build a
    ``PlannerSettings`` directly and hand it to ``TourPlanner``.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from typing import Optional, Tuple

from pydantic import Field, validator
from pydantic_settings import BaseSettings

Bounds = Tuple[float, float, float, float]


class CrossingPolicy(str, Enum):
    """Enumerate how a segment crossing a restricted region is priced."""

    SENTINEL = "sentinel"
    EVASION = "evasion"


class PlannerSettings(BaseSettings):
    """Runtime configuration for the sensor tour planner."""

    environment: str = Field(
        "development",
        description="Environment label used to tell deployments apart in logs.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied the first time a logger is requested.",
    )
    detour_cost: float = Field(
        1.0e6,
        description=(
            "Sentinel cost replacing the distance of any segment that crosses a"
            " restricted region. Must dwarf every direct distance."
        ),
        gt=0,
    )
    crossing_policy: CrossingPolicy = Field(
        CrossingPolicy.SENTINEL,
        description="How crossing segments are priced: fixed sentinel or distance plus evasion.",
    )
    optimisation_passes: int = Field(
        2,
        description="Number of full flip/swap sweeps the local search performs.",
        ge=1,
    )
    confinement_area: Optional[Bounds] = Field(
        None,
        description=(
            "Optional (lat_min, lon_min, lat_max, lon_max) box the start"
            " coordinate must fall inside."
        ),
    )

    class Config:
        env_prefix = "AQPLANNER_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level")
    def _known_level(cls, value: str) -> str:
        """Accept only level names the logging module understands."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown logging level: {value}")
        return normalised

    @validator("confinement_area")
    def _ordered_bounds(cls, value: Optional[Bounds]) -> Optional[Bounds]:
        """Ensure the confinement box has strictly increasing extents."""

        if value is None:
            return value
        lat_min, lon_min, lat_max, lon_max = value
        if lat_min >= lat_max or lon_min >= lon_max:
            raise ValueError("Confinement area must be (lat_min, lon_min, lat_max, lon_max)")
        return value


@lru_cache()
def get_settings() -> PlannerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PlannerSettings()
