"""
Rendering

Compiles scenes to SVG markup. The compiler plans each visible layer
(paints and filter), writes the ``<defs>`` block from those plans and
then one fragment per layer in paint order.
"""

from .compiler import SceneCompiler, compile_scene
from .defs import LayerPlan, filter_id_for, gradient_id_for, paint_order, plan_layer
from .icons import IconRenderer, LetterPlaceholderIcons, MappingIconRenderer

__all__ = [
    'SceneCompiler',
    'compile_scene',
    'LayerPlan',
    'plan_layer',
    'paint_order',
    'gradient_id_for',
    'filter_id_for',
    'IconRenderer',
    'LetterPlaceholderIcons',
    'MappingIconRenderer',
]
