from __future__ import annotations

from math import pi
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

from statstar.model.geometry_primitives import Point, Vector


def polar_point(center: Point, radius: float, angle_rad: float) -> Point:
    """Point at `radius` from `center` in direction `angle_rad` (y axis points down)."""
    return center + Vector.from_polar(radius, angle_rad)


def polar_points(
    center: Point,
    radii: npt.NDArray[np.float64],
    angles: npt.NDArray[np.float64]
) -> npt.NDArray[np.float64]:
    """
    Vectorised `polar_point`.

    Args:
        center: Common origin of all rays.
        radii: Array of shape (n,) with distances from the center.
        angles: Array of shape (n,) with directions in radians.

    Returns:
        An array of shape (n, 2) containing the (x, y) coordinates.
    """
    return np.c_[center.x + radii * np.cos(angles), center.y + radii * np.sin(angles)]


def wrapped_midpoint_angle(angle_a: float, angle_b: float) -> float:
    """
    Angular midpoint of two directions, picking the side of the shorter arc.

    The naive average of two angles more than pi apart points into the larger
    gap. Shifting it by pi flips it back into the smaller one.

    Args:
        angle_a: First angle in radians.
        angle_b: Second angle in radians.

    Returns:
        The midpoint angle in radians (not normalised to any range).

    Example:
        The last arm of the star sits at 198 deg and the first at -90 deg. The
        naive mean is 54 deg (lower right, between arms 1 and 2); the corrected
        value is -126 deg, which lies between arm 4 and arm 0.
    """
    mid = (angle_a + angle_b) / 2
    if abs(angle_b - angle_a) > pi:
        mid += pi if mid < 0 else -pi
    return mid
