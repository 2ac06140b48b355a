from __future__ import annotations

from typing import Any, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from statstar.engine.pipeline import StarScene
    from statstar.engine.tooltip import Tooltip


class StarRenderer(Protocol):
    """
    A drawing surface for star scenes (SVG text, Qt scene, test harness, ...).

    `render` replaces whatever star was drawn before in one step; callers
    never observe a half-old, half-new star.
    """
    def render(self, scene: StarScene) -> Any: ...

    def show_tooltip(self, tooltip: Tooltip) -> None: ...

    def hide_tooltip(self) -> None: ...
