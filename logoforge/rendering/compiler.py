"""
Scene to SVG compiler.

Compilation is pure: the scene is only read, and the same scene always
yields byte-identical markup. Document structure:

    <svg width height viewBox xmlns>
    <defs>gradients, then filters</defs>
    one fragment per visible layer, in paint order
    </svg>
"""

import logging
from typing import Optional

from logoforge.markup import format_attrs, format_number
from logoforge.scene import Scene
from .defs import filter_defs, gradient_defs, paint_order, plan_layer
from .fragments import build_fragment
from .icons import IconRenderer, LetterPlaceholderIcons

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class SceneCompiler:
    """
    Compiles a Scene into an SVG document string.

    Args:
        icon_renderer: Resolves icon names to glyphs. Defaults to the
            letter placeholder, which is also used whenever the renderer
            has nothing for a name.
    """

    def __init__(self, icon_renderer: Optional[IconRenderer] = None):
        self._placeholder = LetterPlaceholderIcons()
        self.icon_renderer = icon_renderer or self._placeholder

    def compile(self, scene: Scene) -> str:
        canvas = scene.canvas_settings
        plans = [plan_layer(layer) for layer in paint_order(scene.layers)]

        defs = gradient_defs(plans) + filter_defs(plans)
        fragments = [
            build_fragment(plan, canvas, self.icon_renderer, self._placeholder)
            for plan in plans
        ]
        fragments = [fragment for fragment in fragments if fragment]

        root = format_attrs([
            ('width', canvas.width),
            ('height', canvas.height),
            ('viewBox', f"0 0 {format_number(canvas.width)} {format_number(canvas.height)}"),
            ('xmlns', SVG_NAMESPACE),
        ])
        parts = [f"<svg {root}>", "<defs>" + "".join(defs) + "</defs>"]
        parts.extend(fragments)
        parts.append("</svg>")

        logger.debug(f"Compiled scene: {len(plans)} of {len(scene.layers)} layers drawn, {len(defs)} defs")
        return "\n".join(parts)


_default_compiler = SceneCompiler()


def compile_scene(scene: Scene) -> str:
    """Compile a scene with the default compiler (letter placeholder icons)."""
    return _default_compiler.compile(scene)
