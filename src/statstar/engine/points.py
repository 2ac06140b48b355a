"""
Point Calculator
================
Maps the five stat totals onto the five arm tips of the star.

Normalisation has two regimes:
    - small data (largest total <= 20): absolute 0..20 scale, so early
      progress is visible even when every stat is tiny;
    - larger data: relative to the largest total, with a 0.1 floor for any
      non-zero stat so it never disappears next to a dominant one.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union
import logging

import numpy as np

from statstar.config import GEOMETRY, GeometryParams
from statstar.model.geometry_primitives import Point
from statstar.model.geometry_utils import polar_points
from statstar.model.stats import STAT_ORDER, StatId, StatValues

logger = logging.getLogger(__name__)

StatsLike = Union[StatValues, Mapping[Union[StatId, str], Any]]


@dataclass(frozen=True)
class StarPoint:
    """One arm of the star, fully resolved."""
    stat_id: StatId
    value: int
    angle: float  # radians
    radius: float
    normalized_value: float
    tip: Point


def as_stat_values(stats: StatsLike) -> StatValues:
    if isinstance(stats, StatValues):
        return stats
    return StatValues.from_mapping(stats)


def normalize_value(
    value: float,
    max_stat_value: float,
    params: GeometryParams = GEOMETRY
) -> float:
    """
    Map a stat total onto [0, 1] (for non-negative input).

    Args:
        value: The stat total.
        max_stat_value: Largest of the five totals, already floored at 1.
        params: Geometry whose scale limit and visibility floor apply.

    Returns:
        The normalized value used to interpolate the arm radius.
    """
    limit = params.absolute_scale_limit
    if max_stat_value <= limit:
        return min(value / limit, 1.0)

    normalized = min(value / max(max_stat_value, limit), 1.0)
    if value > 0 and normalized < params.visibility_floor:
        normalized = params.visibility_floor
    return normalized


def radius_for(normalized: float, params: GeometryParams = GEOMETRY) -> float:
    return params.min_radius + (params.max_radius - params.min_radius) * normalized


def compute_points(stats: StatsLike, params: GeometryParams = GEOMETRY) -> list[StarPoint]:
    """
    Resolve the five arms for the given totals, in fixed clockwise stat order.

    All-zero input yields a regular pentagon at `min_radius`, never a point.
    """
    values = as_stat_values(stats)
    max_stat_value = values.max_value()

    normalized = [normalize_value(values.get(stat), max_stat_value, params) for stat in STAT_ORDER]
    radii = np.array([radius_for(n, params) for n in normalized], dtype=np.float64)
    angles = np.array([params.arm_angle(i) for i in range(len(STAT_ORDER))], dtype=np.float64)
    tips = polar_points(Point(params.center_x, params.center_y), radii, angles)

    points = [
        StarPoint(
            stat_id=stat,
            value=values.get(stat),
            angle=float(angles[i]),
            radius=float(radii[i]),
            normalized_value=float(normalized[i]),
            tip=Point(float(tips[i, 0]), float(tips[i, 1])),
        )
        for i, stat in enumerate(STAT_ORDER)
    ]

    logger.debug(
        f"Star points for {values.as_dict()} (max {max_stat_value}): "
        f"{[(p.stat_id.value, round(p.radius, 3)) for p in points]}"
    )
    return points
