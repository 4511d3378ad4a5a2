"""
Markup fragments for single layers.

Each builder returns the element(s) of one layer, carrying its opacity,
composed transform and filter reference. Missing optional values leave
their attribute out instead of failing.
"""

import math
from typing import Any, Optional

from logoforge.color import PaintReference
from logoforge.layers import BackgroundLayer, BaseLayer, IconLayer, ShapeLayer, ShapeType, TextLayer
from logoforge.markup import element, escape_text, format_number
from logoforge.scene import CanvasSettings
from logoforge.transform import compose_transform
from .defs import LayerPlan
from .icons import IconRenderer

Attrs = list[tuple[str, Any]]

DEFAULT_POLYGON_SIDES = 6
DEFAULT_STAR_POINTS = 5
DEFAULT_STAR_INNER_RATIO = 0.5

_TEXT_ANCHORS = {
    'left': 'start',
    'center': 'middle',
    'right': 'end',
    'justify': 'start',
}

_BASELINES = {
    'top': 'hanging',
    'middle': 'central',
    'bottom': 'alphabetic',
}


def _enum_value(value: Any) -> Any:
    return getattr(value, 'value', value)


def paint_attrs(name: str, paint: Optional[PaintReference]) -> Attrs:
    """``fill``/``stroke`` plus its opacity when the paint is translucent."""
    if paint is None:
        return []
    return [(name, paint.value), (f'{name}-opacity', paint.opacity_attr())]


def stroke_attrs(plan: LayerPlan) -> Attrs:
    """Stroke attributes, only when the layer's stroke is enabled with a positive width."""
    stroke = plan.layer.stroke_paint()
    if stroke is None:
        return []
    _, width = stroke
    return paint_attrs('stroke', plan.paint('stroke')) + [('stroke-width', width)]


def style_attr(layer: BaseLayer, extra: Optional[list[str]] = None) -> Optional[str]:
    rules = list(extra or [])
    blend_mode = _enum_value(layer.blend_mode)
    if blend_mode and blend_mode != 'normal':
        rules.append(f"mix-blend-mode: {blend_mode}")
    return '; '.join(rules) if rules else None


def common_attrs(plan: LayerPlan, *, transformable: bool = True, style: Optional[str] = None) -> Attrs:
    """Opacity, transform, filter reference and style shared by all fragments."""
    layer = plan.layer
    filter_id = plan.filter_id
    return [
        ('opacity', layer.opacity),
        ('transform', compose_transform(layer.transform) if transformable else None),
        ('filter', f"url(#{filter_id})" if filter_id else None),
        ('style', style if style is not None else style_attr(layer)),
    ]


def animation_markup(layer: BaseLayer) -> str:
    if not layer.has_animation():
        return ''
    return layer.animation.to_svg_animation() or ''


def _points(points: list[tuple[float, float]]) -> str:
    return ' '.join(f"{format_number(x)},{format_number(y)}" for x, y in points)


def regular_polygon_points(cx: float, cy: float, radius: float, sides: int) -> list[tuple[float, float]]:
    """
    Vertices of a regular polygon, starting at the top and going clockwise.

    Args:
        cx: Center X
        cy: Center Y
        radius: Circumradius
        sides: Number of vertices (nothing for values below 1)
    """
    if sides < 1:
        return []
    return [
        (
            cx + radius * math.cos(2 * math.pi * i / sides - math.pi / 2),
            cy + radius * math.sin(2 * math.pi * i / sides - math.pi / 2),
        )
        for i in range(sides)
    ]


def star_points(cx: float, cy: float, outer: float, inner: float, points: int) -> list[tuple[float, float]]:
    """Vertices of a star alternating outer and inner radius, starting at the top."""
    if points < 1:
        return []
    vertices = []
    for i in range(points * 2):
        radius = outer if i % 2 == 0 else inner
        angle = math.pi * i / points - math.pi / 2
        vertices.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return vertices


def shape_geometry(layer: ShapeLayer) -> Optional[tuple[str, Attrs]]:
    """
    Element name and geometry attributes for a shape layer.

    Returns:
        ``(tag, attrs)`` or None for shapes that draw nothing
        (unknown type, custom shape without path data).
    """
    x, y = layer.position
    width = layer.width
    height = layer.height
    cx = x + width / 2
    cy = y + height / 2
    shape_type = _enum_value(layer.shape_type)

    if shape_type == ShapeType.RECTANGLE.value:
        attrs = [('x', x), ('y', y), ('width', width), ('height', height)]
        if layer.corner_radius and layer.corner_radius > 0:
            attrs.append(('rx', layer.corner_radius))
        return 'rect', attrs

    if shape_type == ShapeType.CIRCLE.value:
        return 'circle', [('cx', cx), ('cy', cy), ('r', min(width, height) / 2)]

    if shape_type == ShapeType.ELLIPSE.value:
        return 'ellipse', [('cx', cx), ('cy', cy), ('rx', width / 2), ('ry', height / 2)]

    if shape_type == ShapeType.TRIANGLE.value:
        return 'polygon', [('points', _points([(cx, y), (x, y + height), (x + width, y + height)]))]

    if shape_type == ShapeType.POLYGON.value:
        sides = layer.sides if layer.sides is not None else DEFAULT_POLYGON_SIDES
        radius = min(width, height) / 2
        return 'polygon', [('points', _points(regular_polygon_points(cx, cy, radius, sides)))]

    if shape_type == ShapeType.STAR.value:
        count = layer.sides if layer.sides is not None else DEFAULT_STAR_POINTS
        outer = min(width, height) / 2
        ratio = layer.inner_radius if layer.inner_radius is not None else DEFAULT_STAR_INNER_RATIO
        return 'polygon', [('points', _points(star_points(cx, cy, outer, outer * ratio, count)))]

    if shape_type == ShapeType.CUSTOM.value and layer.path:
        return 'path', [('d', layer.path)]

    return None


def build_shape(plan: LayerPlan) -> str:
    layer = plan.layer
    geometry = shape_geometry(layer)
    if geometry is None:
        return ''
    tag, attrs = geometry
    attrs = attrs + paint_attrs('fill', plan.paint('fill')) + stroke_attrs(plan) + common_attrs(plan)
    return element(tag, attrs, animation_markup(layer))


def _transform_text(content: str, text_transform: str) -> str:
    if text_transform == 'uppercase':
        return content.upper()
    if text_transform == 'lowercase':
        return content.lower()
    if text_transform == 'capitalize':
        return ' '.join(word[:1].upper() + word[1:] for word in content.split(' '))
    return content


def build_text(plan: LayerPlan) -> str:
    layer = plan.layer
    font = layer.font
    x, y = layer.position

    attrs: Attrs = [('x', x), ('y', y)]
    if font is not None:
        attrs += [
            ('font-family', font.family),
            ('font-size', font.size),
            ('font-weight', font.weight),
            ('font-style', font.style),
            ('letter-spacing', font.letter_spacing or None),
            ('word-spacing', font.word_spacing or None),
            ('text-decoration', font.text_decoration if font.text_decoration not in (None, 'none') else None),
        ]
    attrs += [
        ('text-anchor', _TEXT_ANCHORS.get(layer.text_align, 'start')),
        ('dominant-baseline', _BASELINES.get(layer.vertical_align)),
    ]
    attrs += paint_attrs('fill', plan.paint('color')) + stroke_attrs(plan) + common_attrs(plan)

    content = layer.content or ''
    if font is not None:
        content = _transform_text(content, font.text_transform)
    return element('text', attrs, escape_text(content) + animation_markup(layer))


def build_icon(plan: LayerPlan, icon_renderer: IconRenderer, fallback: IconRenderer) -> str:
    layer = plan.layer
    x, y = layer.position
    paint = plan.paint('color')
    fill = paint.value if paint is not None else '#000000'

    glyph = icon_renderer.render_icon(layer, fill, x, y)
    if glyph is None:
        glyph = fallback.render_icon(layer, fill, x, y)
    return element('g', common_attrs(plan), glyph + animation_markup(layer))


def build_background(plan: LayerPlan, canvas: CanvasSettings) -> str:
    """Full-canvas rectangle; the layer's own transform is ignored."""
    layer = plan.layer
    attrs = [
        ('x', 0),
        ('y', 0),
        ('width', canvas.width),
        ('height', canvas.height),
    ]
    attrs += paint_attrs('fill', plan.paint('fill')) + common_attrs(plan, transformable=False)
    return element('rect', attrs, animation_markup(layer))


def build_fragment(
    plan: LayerPlan,
    canvas: CanvasSettings,
    icon_renderer: IconRenderer,
    fallback: IconRenderer,
) -> str:
    """Dispatch on the layer variant."""
    layer = plan.layer
    if isinstance(layer, BackgroundLayer):
        return build_background(plan, canvas)
    if isinstance(layer, ShapeLayer):
        return build_shape(plan)
    if isinstance(layer, TextLayer):
        return build_text(plan)
    if isinstance(layer, IconLayer):
        return build_icon(plan, icon_renderer, fallback)
    return ''
