"""
Configuration & Constants
=========================
This module is the central registry for the star's fixed geometry and palette.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (radii, angles, colours) scattered
   throughout the engine and the renderers.
2. Overrides: Every engine function takes an optional `GeometryParams`, so a
   caller can draw on a different canvas without touching the math.

Exports:
    GEOMETRY (GeometryParams): The default 400x400 canvas geometry.
    STAT_DISPLAY_NAMES (dict): Human-readable stat names.
    STAT_COLORS (dict): Per-stat accent colours (tooltips only).
"""
from __future__ import annotations

from dataclasses import dataclass
from math import radians

from statstar.model.stats import StatId


@dataclass(frozen=True)
class GeometryParams:
    """Immutable geometry of the star canvas."""
    center_x: float = 200.0
    center_y: float = 200.0
    min_radius: float = 30.0  # arm length for a zero stat
    max_radius: float = 150.0
    arm_count: int = 5
    base_inner_radius_factor: float = 0.4
    absolute_scale_limit: int = 20  # below this the 0..20 absolute scale is used
    visibility_floor: float = 0.1
    canvas_size: int = 400

    @property
    def arm_step_degrees(self) -> float:
        return 360.0 / self.arm_count

    def arm_angle(self, index: int) -> float:
        """Angle of arm `index` in radians. Arm 0 points up, the rest follow clockwise."""
        return radians(index * self.arm_step_degrees - 90.0)


GEOMETRY = GeometryParams()

# ------------------------------------------------------------------------------
# Stat naming and accents
# ------------------------------------------------------------------------------
STAT_DISPLAY_NAMES: dict[StatId, str] = {
    StatId.PHYSICAL: "Physical",
    StatId.MENTAL: "Mental",
    StatId.SOCIAL: "Social",
    StatId.CREATIVE: "Creative",
    StatId.PRODUCTIVE: "Productive",
}

# Not used for the star body, which always uses the gold bevel palette.
STAT_COLORS: dict[StatId, str] = {
    StatId.PHYSICAL: "#ff4444",
    StatId.MENTAL: "#4488ff",
    StatId.SOCIAL: "#44ff44",
    StatId.CREATIVE: "#ff44ff",
    StatId.PRODUCTIVE: "#ffaa44",
}

# ------------------------------------------------------------------------------
# Bevel palette
# ------------------------------------------------------------------------------
WARM_GOLD = "#FFA500"
DARK_GOLD = "#FF8C00"
BRIGHT_GOLD = "#FFD700"
PALE_YELLOW = "#FFFFE0"

GLOW_BLUR_RADIUS: float = 2.5
GLOW_FILTER_ID = "starGlow"

# ------------------------------------------------------------------------------
# Reference guides
# ------------------------------------------------------------------------------
GUIDE_RING_COUNT = 3
GUIDE_OPACITY = 0.1
BACKDROP_STROKE = "rgba(255, 255, 255, 0.1)"
BACKDROP_STROKE_WIDTH = 2.0
BACKDROP_DASH = (5.0, 5.0)
RING_STROKE = "rgba(255, 255, 255, 0.3)"
SPOKE_STROKE = "rgba(255, 255, 255, 0.2)"

# ------------------------------------------------------------------------------
# Tooltip
# ------------------------------------------------------------------------------
TOOLTIP_TEXT_OFFSET = 18.0  # px above the tip
TOOLTIP_BOX_WIDTH = 80.0
TOOLTIP_BOX_HEIGHT = 25.0
TOOLTIP_BOX_OFFSET_Y = 35.0
TOOLTIP_CORNER_RADIUS = 5.0
TOOLTIP_BACKGROUND = "rgba(0, 0, 0, 0.8)"
TOOLTIP_TEXT_COLOR = "#ffffff"
TOOLTIP_FONT_SIZE = 12
