"""
Stat Star
=========
Turns five stat totals into a layered, bevelled five-pointed star.

The MODEL layer holds the stat record and 2-D primitives, the ENGINE layer
holds the pure geometry pipeline and the RENDER layer draws what the engine
describes (SVG text or a Qt graphics scene).
"""
from statstar.model.stats import StatId, StatValues
from statstar.engine.points import StarPoint, compute_points
from statstar.engine.path import build_path
from statstar.engine.layers import StarLayer, compose_layers
from statstar.engine.tooltip import Tooltip, TooltipOverlay, describe_tooltip
from statstar.engine.pipeline import StarScene, update_star, reset_star

__all__ = [
    "StatId",
    "StatValues",
    "StarPoint",
    "compute_points",
    "build_path",
    "StarLayer",
    "compose_layers",
    "Tooltip",
    "TooltipOverlay",
    "describe_tooltip",
    "StarScene",
    "update_star",
    "reset_star",
]
