"""
Geometric Primitives for the star polygon and its path description.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Sequence, Union, TYPE_CHECKING
import math

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """A 2D vector representing direction and magnitude (screen space, y down)."""
    x: float
    y: float

    @staticmethod
    def from_polar(radius: float, angle_rad: float) -> Vector:
        return Vector(math.cos(angle_rad) * radius, math.sin(angle_rad) * radius)


@dataclass(frozen=True)
class Point:
    """A point on the 2D canvas."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Vector or Point from a Point.")

    def scaled_about(self, center: Point, factor: float) -> Point:
        """Move the point towards (factor < 1) or away from `center`."""
        return Point(
            center.x + (self.x - center.x) * factor,
            center.y + (self.y - center.y) * factor,
        )

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


def format_coordinate(value: float, precision: int = 4) -> str:
    """Compact number for path data: trailing zeros dropped, no '-0'."""
    text = f"{round(value, precision):.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


# ------------------------------------------------------------------------------
# Path description
# ------------------------------------------------------------------------------
class PathOp(StrEnum):
    MOVE = "M"
    LINE = "L"
    CLOSE = "Z"


@dataclass(frozen=True)
class PathCommand:
    """One segment command of a vector path. CLOSE carries no point."""
    op: PathOp
    point: Optional[Point] = None

    def to_svg(self, precision: int = 4) -> str:
        if self.point is None:
            return self.op.value
        return (
            f"{self.op.value} {format_coordinate(self.point.x, precision)} "
            f"{format_coordinate(self.point.y, precision)}"
        )


@dataclass(frozen=True)
class StarPolygon:
    """
    Closed loop alternating tip and inner vertices: tip0, inner0, tip1, inner1, ...

    The loop is implicitly closed; the first tip is not repeated at the end.
    """
    vertices: tuple[Point, ...]

    def __post_init__(self) -> None:
        if len(self.vertices) % 2:
            raise ValueError(f"Expected tip/inner pairs, got {len(self.vertices)} vertices.")

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def tips(self) -> tuple[Point, ...]:
        return self.vertices[0::2]

    @property
    def inners(self) -> tuple[Point, ...]:
        return self.vertices[1::2]

    @property
    def commands(self) -> list[PathCommand]:
        """M tip0, L inner0, L tip1, ..., L inner(n-1) back towards tip0, Z."""
        if not self.vertices:
            return []
        cmds = [PathCommand(PathOp.MOVE, self.vertices[0])]
        cmds.extend(PathCommand(PathOp.LINE, v) for v in self.vertices[1:])
        # Last leg ends on tip0 again before closing
        cmds.append(PathCommand(PathOp.LINE, self.vertices[0]))
        cmds.append(PathCommand(PathOp.CLOSE))
        return cmds

    def to_svg_path(self, precision: int = 4) -> str:
        return " ".join(cmd.to_svg(precision) for cmd in self.commands)

    def to_array(self) -> npt.NDArray[np.float64]:
        """(N, 2) array of the vertices in loop order."""
        return np.array([v.to_array() for v in self.vertices], dtype=np.float64).reshape(-1, 2)

    @staticmethod
    def from_pairs(tips: Sequence[Point], inners: Sequence[Point]) -> StarPolygon:
        if len(tips) != len(inners):
            raise ValueError("Every tip needs exactly one following inner vertex.")
        vertices: list[Point] = []
        for tip, inner in zip(tips, inners):
            vertices.extend((tip, inner))
        return StarPolygon(tuple(vertices))
