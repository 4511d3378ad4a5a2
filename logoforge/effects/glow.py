"""Glow effect."""
from typing import ClassVar, Optional

from pydantic import Field

from logoforge.markup import element
from .base import EffectSettings


class GlowEffect(EffectSettings):
    """Colored glow around the layer content."""

    effect_type: ClassVar[str] = "glow"

    color: str = Field(default='#ffffff')
    size: float = Field(default=0.0)
    intensity: float = Field(default=1.0)

    def to_svg_primitive(self, source: str, result: str) -> Optional[str]:
        """
        Blur the input, tint it with the glow color and merge the input
        back on top.
        """
        if not self.enabled:
            return None

        blurred = f"{result}-blur"
        tint = f"{result}-color"
        fill = f"{result}-fill"
        merge = element('feMergeNode', [('in', fill)]) + element('feMergeNode', [('in', source)])
        return ''.join([
            element('feGaussianBlur', [('in', source), ('stdDeviation', self.size), ('result', blurred)]),
            element('feFlood', [
                ('flood-color', self.color),
                ('flood-opacity', min(self.intensity, 1.0)),
                ('result', tint),
            ]),
            element('feComposite', [('in', tint), ('in2', blurred), ('operator', 'in'), ('result', fill)]),
            element('feMerge', [('result', result)], merge),
        ])
