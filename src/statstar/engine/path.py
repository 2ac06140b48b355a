"""Path Builder: five arm tips -> closed ten-vertex star outline."""
from __future__ import annotations

from typing import Sequence

from statstar.config import GEOMETRY, GeometryParams
from statstar.engine.points import StarPoint
from statstar.model.geometry_primitives import Point, StarPolygon
from statstar.model.geometry_utils import polar_point, wrapped_midpoint_angle


def inner_vertex_angle(current: StarPoint, nxt: StarPoint) -> float:
    """Direction of the inner vertex between two neighbouring arms."""
    return wrapped_midpoint_angle(current.angle, nxt.angle)


def inner_vertex_radius(
    current: StarPoint,
    nxt: StarPoint,
    params: GeometryParams = GEOMETRY
) -> float:
    """
    The waist follows the two adjacent arms, but never drops below
    `min_radius * base_inner_radius_factor`.
    """
    factor = params.base_inner_radius_factor
    avg_radius = (current.radius + nxt.radius) / 2
    return max(params.min_radius * factor, avg_radius * factor)


def build_path(points: Sequence[StarPoint], params: GeometryParams = GEOMETRY) -> StarPolygon:
    """
    Build the star outline: tip0, inner0, tip1, inner1, ... tip4, inner4 (closed).

    Raises:
        ValueError: If no points are given.
    """
    if not points:
        raise ValueError("Cannot build a star path without points.")

    center = Point(params.center_x, params.center_y)
    tips: list[Point] = []
    inners: list[Point] = []

    for i, current in enumerate(points):
        nxt = points[(i + 1) % len(points)]
        tips.append(current.tip)
        inners.append(
            polar_point(
                center,
                inner_vertex_radius(current, nxt, params),
                inner_vertex_angle(current, nxt),
            )
        )

    return StarPolygon.from_pairs(tips, inners)
