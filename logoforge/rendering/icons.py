"""
Icon rendering collaborator.

Icon names are keys into an external icon set. The compiler hands each
icon layer to an IconRenderer; when the renderer has nothing for a name
(returns None) the letter placeholder is drawn instead.
"""

from abc import ABC, abstractmethod
from typing import Optional

from logoforge.layers import IconLayer
from logoforge.markup import element, escape_text, format_number


class IconRenderer(ABC):
    """Maps an icon layer to glyph markup drawn inside the layer's group."""

    @abstractmethod
    def render_icon(self, layer: IconLayer, paint: str, x: float, y: float) -> Optional[str]:
        """
        Render the glyph of an icon layer.

        Args:
            layer: Icon layer to draw
            paint: Resolved fill value (color or ``url(#...)``)
            x: Left edge of the icon box
            y: Top edge of the icon box

        Returns:
            Markup for the glyph, or None if the icon is unknown
        """
        pass


class LetterPlaceholderIcons(IconRenderer):
    """Rounded square tinted with the icon color plus the name's first letter."""

    CORNER_RADIUS = 4
    LETTER_SCALE = 0.6
    LETTER_COLOR = 'white'

    def render_icon(self, layer: IconLayer, paint: str, x: float, y: float) -> str:
        size = layer.size
        letter = layer.icon_name[:1].upper() or '?'
        square = element('rect', [
            ('x', x),
            ('y', y),
            ('width', size),
            ('height', size),
            ('fill', paint),
            ('rx', self.CORNER_RADIUS),
        ])
        glyph = element('text', [
            ('x', x + size / 2),
            ('y', y + size / 2),
            ('text-anchor', 'middle'),
            ('dominant-baseline', 'central'),
            ('font-size', size * self.LETTER_SCALE),
            ('fill', self.LETTER_COLOR),
        ], escape_text(letter))
        return square + glyph


class MappingIconRenderer(IconRenderer):
    """
    Icon renderer backed by a name -> SVG path data mapping.

    Paths are drawn in a 24x24 box scaled to the layer size, the usual
    grid of web icon sets.
    """

    VIEWBOX_SIZE = 24

    def __init__(self, paths: dict[str, str]):
        self._paths = dict(paths)

    def render_icon(self, layer: IconLayer, paint: str, x: float, y: float) -> Optional[str]:
        path = self._paths.get(layer.icon_name)
        if not path:
            return None
        scale = layer.size / self.VIEWBOX_SIZE
        return element('path', [
            ('d', path),
            ('fill', paint),
            ('transform', f"translate({format_number(x)}, {format_number(y)}) scale({format_number(scale)})"),
        ])
