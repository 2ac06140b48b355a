"""
The RENDER layer draws scenes produced by the engine.
The engine never imports from here.
"""
from statstar.render.base import StarRenderer
from statstar.render.svg import SvgRenderer
from statstar.render.transitions import EntranceTransition, TransitionFrame, TransitionHandle

__all__ = ["StarRenderer", "SvgRenderer", "EntranceTransition", "TransitionFrame", "TransitionHandle"]
