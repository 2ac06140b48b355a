"""
SVG Renderer
============
Writes a star scene as a standalone SVG document.

The document contains, in paint order: the glow filter definition, the
reference guides, the bevel layers (outer first) and the active tooltip.
"""
from __future__ import annotations

from html import escape
from typing import Optional
import logging

from statstar.config import (
    GLOW_BLUR_RADIUS, GLOW_FILTER_ID, TOOLTIP_BACKGROUND, TOOLTIP_CORNER_RADIUS,
    TOOLTIP_FONT_SIZE, TOOLTIP_TEXT_COLOR,
)
from statstar.engine.guides import GuideCircle, GuideSpoke, StarGuides
from statstar.engine.layers import StarLayer
from statstar.engine.pipeline import StarScene
from statstar.engine.tooltip import Tooltip
from statstar.model.geometry_primitives import format_coordinate as fmt
from statstar.render.transitions import TransitionFrame

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"


def glow_filter_svg(filter_id: str = GLOW_FILTER_ID, blur: float = GLOW_BLUR_RADIUS) -> str:
    """Blur the shape, then merge the blur under the original graphic."""
    return (
        f'<filter id="{filter_id}">'
        f'<feGaussianBlur stdDeviation="{fmt(blur)}" result="coloredBlur"/>'
        f'<feMerge><feMergeNode in="coloredBlur"/><feMergeNode in="SourceGraphic"/></feMerge>'
        f'</filter>'
    )


def circle_svg(circle: GuideCircle) -> str:
    dash = ""
    if circle.dash:
        dash = f' stroke-dasharray="{fmt(circle.dash[0])},{fmt(circle.dash[1])}"'
    return (
        f'<circle cx="{fmt(circle.center.x)}" cy="{fmt(circle.center.y)}" r="{fmt(circle.radius)}" '
        f'fill="none" stroke="{circle.stroke_color}" stroke-width="{fmt(circle.stroke_width)}"{dash}/>'
    )


def spoke_svg(spoke: GuideSpoke) -> str:
    return (
        f'<line x1="{fmt(spoke.start.x)}" y1="{fmt(spoke.start.y)}" '
        f'x2="{fmt(spoke.end.x)}" y2="{fmt(spoke.end.y)}" '
        f'stroke="{spoke.stroke_color}" stroke-width="{fmt(spoke.stroke_width)}"/>'
    )


def guides_svg(guides: StarGuides) -> list[str]:
    lines = [circle_svg(guides.backdrop)]
    lines.append(f'<g class="grid-lines" opacity="{fmt(guides.opacity)}">')
    lines.extend(circle_svg(ring) for ring in guides.rings)
    lines.extend(spoke_svg(spoke) for spoke in guides.spokes)
    lines.append("</g>")
    return lines


def layer_svg(layer: StarLayer, filter_id: str = GLOW_FILTER_ID) -> str:
    style = layer.style
    glow = f' filter="url(#{filter_id})"' if style.has_glow else ""
    return (
        f'<path class="star-path star-layer-{layer.index}" d="{layer.to_svg_path()}" '
        f'fill="{style.fill_color}" stroke="{style.stroke_color}" '
        f'stroke-width="{fmt(style.stroke_width)}" opacity="{fmt(style.opacity)}"{glow}/>'
    )


def tooltip_svg(tooltip: Tooltip) -> list[str]:
    box = tooltip.box_origin
    return [
        '<g class="stat-tooltip">',
        f'<rect x="{fmt(box.x)}" y="{fmt(box.y)}" width="{fmt(tooltip.box_width)}" '
        f'height="{fmt(tooltip.box_height)}" fill="{TOOLTIP_BACKGROUND}" '
        f'stroke="{tooltip.border_color}" stroke-width="1" rx="{fmt(TOOLTIP_CORNER_RADIUS)}"/>',
        f'<text x="{fmt(tooltip.anchor_x)}" y="{fmt(tooltip.anchor_y)}" text-anchor="middle" '
        f'fill="{TOOLTIP_TEXT_COLOR}" font-size="{TOOLTIP_FONT_SIZE}" font-weight="bold">'
        f'{escape(tooltip.text)}</text>',
        '</g>',
    ]


class SvgRenderer:
    """
    Keeps the last rendered scene and the active tooltip, and serialises both
    to SVG text on every call.
    """

    def __init__(self, show_guides: bool = True) -> None:
        self.show_guides = show_guides
        self._scene: Optional[StarScene] = None
        self._tooltip: Optional[Tooltip] = None
        self._frame: Optional[TransitionFrame] = None

    @property
    def scene(self) -> Optional[StarScene]:
        return self._scene

    def render(self, scene: StarScene, frame: Optional[TransitionFrame] = None) -> str:
        """
        Replace the current star and return the full document.

        Args:
            scene: The scene to draw.
            frame: Optional entrance-transition frame applied to the star layers.
        """
        self._scene = scene
        self._frame = frame
        return self.to_svg()

    def show_tooltip(self, tooltip: Tooltip) -> None:
        self._tooltip = tooltip

    def hide_tooltip(self) -> None:
        self._tooltip = None

    def to_svg(self) -> str:
        if self._scene is None:
            raise RuntimeError("Nothing rendered yet; call render() first.")

        params = self._scene.params
        size = params.canvas_size
        lines = [
            f'<svg xmlns="{SVG_NS}" width="{size}" height="{size}" viewBox="0 0 {size} {size}">',
            f"<defs>{glow_filter_svg()}</defs>",
        ]
        if self.show_guides:
            lines.extend(guides_svg(self._scene.guides))

        lines.append(self._open_star_group())
        lines.extend(layer_svg(layer) for layer in self._scene.layers)
        lines.append("</g>")

        if self._tooltip is not None:
            lines.extend(tooltip_svg(self._tooltip))

        lines.append("</svg>")
        logger.debug(f"SVG document built with {len(self._scene.layers)} layers.")
        return "\n".join(lines)

    def _open_star_group(self) -> str:
        if self._frame is None or self._frame.finished:
            return '<g class="star">'
        cx = fmt(self._scene.params.center_x)
        cy = fmt(self._scene.params.center_y)
        return (
            f'<g class="star" opacity="{fmt(self._frame.opacity)}" '
            f'transform="translate({cx} {cy}) scale({fmt(self._frame.scale)}) translate(-{cx} -{cy})">'
        )
