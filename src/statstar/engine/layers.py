"""
Layer Composer
==============
Produces the bevel effect: several copies of the star outline, each shrunk
towards the center and drawn in a lighter gold than the one beneath it.

Layers are returned in draw order (outer first), so the innermost layer,
which also carries the glow, ends up on top.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence
import logging

from statstar.config import (
    GEOMETRY, GeometryParams, WARM_GOLD, DARK_GOLD, BRIGHT_GOLD, PALE_YELLOW
)
from statstar.engine.path import build_path
from statstar.engine.points import StarPoint
from statstar.model.geometry_primitives import Point, StarPolygon

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayerStyle:
    scale: float
    fill_color: str
    stroke_color: str
    opacity: float = 1.0
    stroke_width: float = 1.0
    has_glow: bool = False


BEVEL_LAYERS: tuple[LayerStyle, ...] = (
    LayerStyle(scale=1.0, fill_color=WARM_GOLD, stroke_color=DARK_GOLD),
    LayerStyle(scale=0.9, fill_color=BRIGHT_GOLD, stroke_color=WARM_GOLD),
    LayerStyle(scale=0.8, fill_color=PALE_YELLOW, stroke_color=BRIGHT_GOLD, has_glow=True),
)


@dataclass(frozen=True)
class StarLayer:
    index: int
    polygon: StarPolygon
    style: LayerStyle

    @property
    def scale(self) -> float:
        return self.style.scale

    @property
    def fill_color(self) -> str:
        return self.style.fill_color

    @property
    def stroke_color(self) -> str:
        return self.style.stroke_color

    @property
    def opacity(self) -> float:
        return self.style.opacity

    @property
    def has_glow(self) -> bool:
        return self.style.has_glow

    def to_svg_path(self) -> str:
        return self.polygon.to_svg_path()


def scale_points(
    points: Sequence[StarPoint],
    factor: float,
    params: GeometryParams = GEOMETRY
) -> list[StarPoint]:
    """Copies of `points` with radius and tip scaled about the center."""
    center = Point(params.center_x, params.center_y)
    return [
        replace(p, radius=p.radius * factor, tip=p.tip.scaled_about(center, factor))
        for p in points
    ]


def compose_layers(
    points: Sequence[StarPoint],
    params: GeometryParams = GEOMETRY,
    styles: Sequence[LayerStyle] = BEVEL_LAYERS
) -> list[StarLayer]:
    """
    One layer per style entry, outer to inner.

    Inner vertices are rebuilt from the scaled arm radii rather than scaled
    after the fact, so the waist keeps its proportion in every layer. The
    `min_radius * factor` waist clamp is applied to the scaled radii as well.
    """
    layers = [
        StarLayer(
            index=index,
            polygon=build_path(scale_points(points, style.scale, params), params),
            style=style,
        )
        for index, style in enumerate(styles)
    ]
    logger.debug(f"Composed {len(layers)} star layers.")
    return layers
