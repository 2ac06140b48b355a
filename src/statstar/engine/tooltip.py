"""
Interaction Overlay
===================
Label payload shown when the user points at an arm tip.

Classes:
    Tooltip: What to draw (anchor, text, box geometry, accent colour).
    TooltipOverlay: Keeps track of the single active tooltip.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import logging

from statstar.config import (
    STAT_COLORS, STAT_DISPLAY_NAMES, TOOLTIP_BOX_HEIGHT, TOOLTIP_BOX_OFFSET_Y,
    TOOLTIP_BOX_WIDTH, TOOLTIP_TEXT_OFFSET,
)
from statstar.engine.points import StarPoint
from statstar.model.geometry_primitives import Point, Vector
from statstar.model.stats import StatId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tooltip:
    stat_id: StatId
    value: int
    anchor: Point  # text anchor (centered horizontally)
    text: str
    border_color: str
    box_origin: Point  # top-left of the background box
    box_width: float = TOOLTIP_BOX_WIDTH
    box_height: float = TOOLTIP_BOX_HEIGHT

    @property
    def anchor_x(self) -> float:
        return self.anchor.x

    @property
    def anchor_y(self) -> float:
        return self.anchor.y


def tooltip_text(stat_id: StatId, value: int) -> str:
    return f"{STAT_DISPLAY_NAMES[stat_id]}: {value}"


def describe_tooltip(point: StarPoint) -> Tooltip:
    """Label for `point`, lifted above its tip so it does not cover the star."""
    tip = point.tip
    return Tooltip(
        stat_id=point.stat_id,
        value=point.value,
        anchor=tip - Vector(0.0, TOOLTIP_TEXT_OFFSET),
        text=tooltip_text(point.stat_id, point.value),
        border_color=STAT_COLORS[point.stat_id],
        box_origin=tip - Vector(TOOLTIP_BOX_WIDTH / 2, TOOLTIP_BOX_OFFSET_Y),
    )


class TooltipOverlay:
    """At most one tooltip is active; showing a new one retires the old one."""

    def __init__(self) -> None:
        self._active: Optional[Tooltip] = None

    @property
    def active(self) -> Optional[Tooltip]:
        return self._active

    def show(self, point: StarPoint) -> Tooltip:
        self.hide()
        self._active = describe_tooltip(point)
        logger.debug(f"Tooltip shown: {self._active.text}")
        return self._active

    def hide(self) -> Optional[Tooltip]:
        """Retire the active tooltip, returning it (or None if nothing was shown)."""
        retired, self._active = self._active, None
        return retired
