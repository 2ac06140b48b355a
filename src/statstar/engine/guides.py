"""
Reference guides drawn behind the star: a dashed backdrop circle at full arm
length, concentric rings between min and max radius, and one spoke per arm.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from statstar.config import (
    GEOMETRY, GeometryParams, GUIDE_RING_COUNT, GUIDE_OPACITY,
    BACKDROP_STROKE, BACKDROP_STROKE_WIDTH, BACKDROP_DASH, RING_STROKE, SPOKE_STROKE,
)
from statstar.model.geometry_primitives import Point
from statstar.model.geometry_utils import polar_point


@dataclass(frozen=True)
class GuideCircle:
    center: Point
    radius: float
    stroke_color: str
    stroke_width: float = 1.0
    dash: Optional[tuple[float, float]] = None


@dataclass(frozen=True)
class GuideSpoke:
    start: Point
    end: Point
    stroke_color: str
    stroke_width: float = 1.0


@dataclass(frozen=True)
class StarGuides:
    backdrop: GuideCircle
    rings: tuple[GuideCircle, ...] = field(default_factory=tuple)
    spokes: tuple[GuideSpoke, ...] = field(default_factory=tuple)
    opacity: float = GUIDE_OPACITY  # applies to rings and spokes, not the backdrop


def ring_radii(params: GeometryParams = GEOMETRY, count: int = GUIDE_RING_COUNT) -> list[float]:
    span = params.max_radius - params.min_radius
    return [params.min_radius + span * (k / count) for k in range(1, count + 1)]


def build_guides(params: GeometryParams = GEOMETRY) -> StarGuides:
    center = Point(params.center_x, params.center_y)
    backdrop = GuideCircle(
        center=center,
        radius=params.max_radius,
        stroke_color=BACKDROP_STROKE,
        stroke_width=BACKDROP_STROKE_WIDTH,
        dash=BACKDROP_DASH,
    )
    rings = tuple(GuideCircle(center, r, RING_STROKE) for r in ring_radii(params))
    spokes = tuple(
        GuideSpoke(center, polar_point(center, params.max_radius, params.arm_angle(i)), SPOKE_STROKE)
        for i in range(params.arm_count)
    )
    return StarGuides(backdrop=backdrop, rings=rings, spokes=spokes)
