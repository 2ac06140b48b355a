"""
Qt Renderer
===========
Draws star scenes into a `QGraphicsScene` (PySide6).

Why is this file needed?
------------------------
1. Desktop: a `QGraphicsView` showing `renderer.graphics_scene` is all a Qt
   window needs to display the star.
2. Atomic swap: old star items are removed before the new ones are added
   within one call, so a view never paints a mix of two stars.
3. Transitions: the entrance effect runs on a Qt animation that is stopped
   (and snapped to its end state) as soon as a newer star is rendered.

Classes:
    QtStarRenderer: The renderer; emits `star_rendered` after every swap.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from PySide6.QtCore import (
    QAbstractAnimation, QEasingCurve, QObject, QPointF, QRectF, QSequentialAnimationGroup,
    QVariantAnimation, Qt, Signal,
)
from PySide6.QtGui import QBrush, QColor, QFont, QPainterPath, QPen
from PySide6.QtWidgets import (
    QGraphicsDropShadowEffect, QGraphicsEllipseItem, QGraphicsItem, QGraphicsItemGroup,
    QGraphicsLineItem, QGraphicsPathItem, QGraphicsScene, QGraphicsSimpleTextItem,
)

from statstar.config import (
    GLOW_BLUR_RADIUS, TOOLTIP_BACKGROUND, TOOLTIP_CORNER_RADIUS, TOOLTIP_FONT_SIZE,
    TOOLTIP_TEXT_COLOR, GeometryParams,
)
from statstar.engine.guides import GuideCircle, StarGuides
from statstar.engine.layers import StarLayer
from statstar.engine.pipeline import StarScene
from statstar.engine.tooltip import Tooltip
from statstar.model.geometry_primitives import PathOp, StarPolygon
from statstar.render.transitions import EntranceTransition

logger = logging.getLogger(__name__)

# Qt's blur radius spans roughly three standard deviations of the SVG blur
QT_BLUR_PER_STD_DEVIATION = 3.0

# QGraphicsItem data slot holding the layer opacity from its style
BASE_OPACITY_KEY = 0

_RGBA_RE = re.compile(r"rgba\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,\s*([\d.]+)\s*\)")


def to_qcolor(value: str) -> QColor:
    """QColor from '#rrggbb', a named colour or a CSS 'rgba(r, g, b, a)' string."""
    match = _RGBA_RE.fullmatch(value.strip())
    if match:
        r, g, b, a = match.groups()
        color = QColor(int(r), int(g), int(b))
        color.setAlphaF(float(a))
        return color
    color = QColor(value)
    if not color.isValid():
        raise ValueError(f"Unsupported colour '{value}'.")
    return color


def polygon_to_painter_path(polygon: StarPolygon) -> QPainterPath:
    path = QPainterPath()
    for cmd in polygon.commands:
        match cmd.op:
            case PathOp.MOVE:
                path.moveTo(cmd.point.x, cmd.point.y)
            case PathOp.LINE:
                path.lineTo(cmd.point.x, cmd.point.y)
            case PathOp.CLOSE:
                path.closeSubpath()
    return path


class QtStarRenderer(QObject):
    """Renders `StarScene`s as graphics items of a single `QGraphicsScene`."""
    star_rendered = Signal(object)

    def __init__(
        self,
        graphics_scene: Optional[QGraphicsScene] = None,
        transition: Optional[EntranceTransition] = None,
        show_guides: bool = True,
        parent: Optional[QObject] = None
    ) -> None:
        super().__init__(parent)
        self.graphics_scene = graphics_scene or QGraphicsScene()
        self.transition = transition
        self.show_guides = show_guides

        self._star_items: list[QGraphicsPathItem] = []
        self._guide_items: list[QGraphicsItem] = []
        self._tooltip_item: Optional[QGraphicsItemGroup] = None
        self._animation: Optional[QSequentialAnimationGroup] = None
        self._fade_in: Optional[QVariantAnimation] = None
        self._running: Optional[EntranceTransition] = None
        # Params the guide items were drawn for; None while no guides are shown
        self._guides_for: Optional[GeometryParams] = None

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def star_items(self) -> list[QGraphicsPathItem]:
        return list(self._star_items)

    @property
    def animation(self) -> Optional[QSequentialAnimationGroup]:
        return self._animation

    def render(self, scene: StarScene) -> QGraphicsScene:
        """Swap the drawn star for `scene` and start the entrance transition, if any."""
        self._stop_animation()
        self._clear_star()

        wanted = scene.params if self.show_guides else None
        if wanted != self._guides_for:
            self._clear_guides()
            if wanted is not None:
                self._draw_guides(scene.guides)
            self._guides_for = wanted

        center = QPointF(scene.params.center_x, scene.params.center_y)
        for layer in scene.layers:
            item = self._make_layer_item(layer)
            item.setTransformOriginPoint(center)
            self.graphics_scene.addItem(item)
            self._star_items.append(item)

        self.graphics_scene.setSceneRect(QRectF(0, 0, scene.params.canvas_size, scene.params.canvas_size))

        if self.transition is not None:
            self._start_animation(self.transition)

        logger.debug(f"Qt scene updated with {len(self._star_items)} star layers.")
        self.star_rendered.emit(scene)
        return self.graphics_scene

    def show_tooltip(self, tooltip: Tooltip) -> None:
        self.hide_tooltip()

        box = QPainterPath()
        box.addRoundedRect(
            QRectF(tooltip.box_origin.x, tooltip.box_origin.y, tooltip.box_width, tooltip.box_height),
            TOOLTIP_CORNER_RADIUS,
            TOOLTIP_CORNER_RADIUS,
        )
        background = QGraphicsPathItem(box)
        background.setBrush(QBrush(to_qcolor(TOOLTIP_BACKGROUND)))
        background.setPen(QPen(to_qcolor(tooltip.border_color), 1.0))

        text = QGraphicsSimpleTextItem(tooltip.text)
        font = QFont()
        font.setPixelSize(TOOLTIP_FONT_SIZE)
        font.setBold(True)
        text.setFont(font)
        text.setBrush(QBrush(to_qcolor(TOOLTIP_TEXT_COLOR)))
        # Anchor is the horizontal middle of the text baseline
        bounds = text.boundingRect()
        text.setPos(tooltip.anchor_x - bounds.width() / 2, tooltip.anchor_y - bounds.height())

        group = QGraphicsItemGroup()
        group.addToGroup(background)
        group.addToGroup(text)
        group.setZValue(len(self._star_items) + 10)
        self.graphics_scene.addItem(group)
        self._tooltip_item = group

    def hide_tooltip(self) -> None:
        if self._tooltip_item is not None:
            self.graphics_scene.removeItem(self._tooltip_item)
            self._tooltip_item = None

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _make_layer_item(self, layer: StarLayer) -> QGraphicsPathItem:
        style = layer.style
        item = QGraphicsPathItem(polygon_to_painter_path(layer.polygon))
        item.setBrush(QBrush(to_qcolor(style.fill_color)))
        item.setPen(QPen(to_qcolor(style.stroke_color), style.stroke_width))
        item.setOpacity(style.opacity)
        item.setData(BASE_OPACITY_KEY, style.opacity)
        item.setZValue(layer.index + 1)  # guides sit at z=0

        if style.has_glow:
            glow = QGraphicsDropShadowEffect()
            glow.setOffset(0.0, 0.0)
            glow.setBlurRadius(GLOW_BLUR_RADIUS * QT_BLUR_PER_STD_DEVIATION)
            glow.setColor(to_qcolor(style.fill_color))
            item.setGraphicsEffect(glow)
        return item

    def _clear_guides(self) -> None:
        for item in self._guide_items:
            self.graphics_scene.removeItem(item)
        self._guide_items.clear()

    def _draw_guides(self, guides: StarGuides) -> None:
        self._guide_items.append(self._make_circle_item(guides.backdrop, opacity=1.0))
        for ring in guides.rings:
            self._guide_items.append(self._make_circle_item(ring, opacity=guides.opacity))
        for spoke in guides.spokes:
            line = QGraphicsLineItem(spoke.start.x, spoke.start.y, spoke.end.x, spoke.end.y)
            line.setPen(QPen(to_qcolor(spoke.stroke_color), spoke.stroke_width))
            line.setOpacity(guides.opacity)
            self._guide_items.append(line)

        for item in self._guide_items:
            item.setZValue(0)
            self.graphics_scene.addItem(item)

    @staticmethod
    def _make_circle_item(circle: GuideCircle, opacity: float) -> QGraphicsEllipseItem:
        r = circle.radius
        item = QGraphicsEllipseItem(circle.center.x - r, circle.center.y - r, 2 * r, 2 * r)
        pen = QPen(to_qcolor(circle.stroke_color), circle.stroke_width)
        if circle.dash:
            pen.setStyle(Qt.PenStyle.CustomDashLine)
            # Qt dash pattern is expressed in pen widths
            pen.setDashPattern([d / circle.stroke_width for d in circle.dash])
        item.setPen(pen)
        item.setBrush(Qt.BrushStyle.NoBrush)
        item.setOpacity(opacity)
        return item

    def _clear_star(self) -> None:
        """Remove all star layer items (old nodes go before new ones arrive)."""
        for item in self._star_items:
            self.graphics_scene.removeItem(item)
        self._star_items.clear()

    def _apply_progress(self, value: float) -> None:
        transition = self._running
        if transition is None:
            return
        scale = transition.start_scale + (transition.end_scale - transition.start_scale) * value
        opacity = transition.start_opacity + (transition.end_opacity - transition.start_opacity) * value
        for item in self._star_items:
            item.setScale(scale)
            item.setOpacity(item.data(BASE_OPACITY_KEY) * opacity)

    def _start_animation(self, transition: EntranceTransition) -> None:
        self._running = transition
        self._apply_progress(0.0)

        fade_in = QVariantAnimation()
        fade_in.setStartValue(0.0)
        fade_in.setEndValue(1.0)
        fade_in.setDuration(int(transition.duration * 1000))
        fade_in.setEasingCurve(QEasingCurve.Type.OutCubic)
        fade_in.valueChanged.connect(self._apply_progress)

        # addAnimation reparents fade_in to the group
        group = QSequentialAnimationGroup(self)
        group.addPause(int(transition.delay * 1000))
        group.addAnimation(fade_in)
        group.start()
        self._animation = group
        self._fade_in = fade_in

    def _stop_animation(self) -> None:
        """
        Stop the previous entrance effect, leave the old items fully visible and
        release the animation objects, whether they finished or not.
        """
        group = self._animation
        if group is None:
            return
        if group.state() != QAbstractAnimation.State.Stopped:
            group.stop()
            self._apply_progress(1.0)

        self._fade_in.valueChanged.disconnect(self._apply_progress)
        # Detached groups are owned by Python and freed with their last reference
        group.setParent(None)

        self._animation = None
        self._fade_in = None
        self._running = None
