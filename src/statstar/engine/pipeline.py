"""
Star Pipeline
=============
One full recomputation: stats -> arm points -> bevel layers (+ guides).

Nothing is patched incrementally. Every call rebuilds the whole scene from
the complete set of totals, and the result is handed to a renderer.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from statstar.config import GEOMETRY, GeometryParams
from statstar.engine.guides import StarGuides, build_guides
from statstar.engine.layers import StarLayer, compose_layers
from statstar.engine.points import StarPoint, StatsLike, as_stat_values, compute_points
from statstar.model.stats import StatId, StatValues

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StarScene:
    """Everything a renderer needs for one frame."""
    stats: StatValues
    points: tuple[StarPoint, ...]
    layers: tuple[StarLayer, ...]
    guides: StarGuides
    params: GeometryParams = GEOMETRY

    def point_for(self, stat: StatId | str) -> StarPoint:
        stat_id = StatId(stat)
        for point in self.points:
            if point.stat_id == stat_id:
                return point
        raise KeyError(f"No point for stat '{stat_id}'")

    @property
    def glow_layer(self) -> StarLayer | None:
        return next((layer for layer in self.layers if layer.has_glow), None)


def max_stat_value(stats: StatsLike) -> int:
    return as_stat_values(stats).max_value()


def update_star(stats: StatsLike, params: GeometryParams = GEOMETRY) -> StarScene:
    values = as_stat_values(stats)
    logger.debug(f"Updating star with stats: {values.as_dict()}")
    points = compute_points(values, params)
    return StarScene(
        stats=values,
        points=tuple(points),
        layers=tuple(compose_layers(points, params)),
        guides=build_guides(params),
        params=params,
    )


def reset_star(params: GeometryParams = GEOMETRY) -> StarScene:
    """The empty star: a regular pentagon at minimum radius."""
    return update_star(StatValues.zero(), params)
