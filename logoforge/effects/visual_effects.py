"""
VisualEffects - the effects block carried by every layer.

``resolve_filter`` turns it into a FilterDescription, or None when
nothing would change the rendered output.
"""

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from logoforge.markup import element, format_number
from .filter import FilterDescription, FilterPrimitive
from .glow import GlowEffect
from .shadow import ShadowEffect
from .stroke import StrokeEffect

logger = logging.getLogger(__name__)

# Neutral values of the scalar color adjustments (percentages and degrees)
NEUTRAL_BRIGHTNESS = 100.0
NEUTRAL_CONTRAST = 100.0
NEUTRAL_SATURATION = 100.0
NEUTRAL_HUE = 0.0

# Primitive order inside a filter (first is applied first)
filter_primitive_order = [
    'shadow',   # Behind layer
    'glow',     # Around layer
    'blur',     # Whole result
    'adjust',   # Color matrix on top of everything
]


class VisualEffects(BaseModel):
    """
    Effects block of a layer.

    Serialization format:
    {
        "shadow": {"enabled": false, "offsetX": 0, ...},
        "glow": {"enabled": false, "color": "#ffffff", "size": 0, "intensity": 1},
        "stroke": {"enabled": false, "width": 1, "color": {...}, "position": "outside"},
        "blur": 0,
        "brightness": 100,
        "contrast": 100,
        "saturation": 100,
        "hue": 0,
        "blendMode": "normal"
    }
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=False,
        extra='ignore',
    )

    shadow: ShadowEffect = Field(default_factory=ShadowEffect)
    glow: GlowEffect = Field(default_factory=GlowEffect)
    stroke: StrokeEffect = Field(default_factory=StrokeEffect)
    blur: float = Field(default=0.0)
    brightness: float = Field(default=NEUTRAL_BRIGHTNESS)
    contrast: float = Field(default=NEUTRAL_CONTRAST)
    saturation: float = Field(default=NEUTRAL_SATURATION)
    hue: float = Field(default=NEUTRAL_HUE)
    blend_mode: str = Field(default='normal', alias='blendMode')

    def has_color_adjustment(self) -> bool:
        """Check if any scalar color adjustment differs from neutral."""
        return (
            self.brightness != NEUTRAL_BRIGHTNESS
            or self.contrast != NEUTRAL_CONTRAST
            or self.saturation != NEUTRAL_SATURATION
            or self.hue != NEUTRAL_HUE
        )

    def color_adjustment_primitive(self, source: str, result: str) -> str:
        """
        Brightness and contrast as one linear color matrix, followed by
        saturation and hue rotation.
        """
        contrast = self.contrast / 100
        slope = (self.brightness / 100) * contrast
        intercept = 0.5 * (1 - contrast)
        s = format_number(slope)
        i = format_number(intercept)
        matrix = f"{s} 0 0 0 {i} 0 {s} 0 0 {i} 0 0 {s} 0 {i} 0 0 0 1 0"

        linear = f"{result}-linear"
        saturated = f"{result}-saturate"
        return ''.join([
            element('feColorMatrix', [('in', source), ('type', 'matrix'), ('values', matrix), ('result', linear)]),
            element('feColorMatrix', [
                ('in', linear),
                ('type', 'saturate'),
                ('values', self.saturation / 100),
                ('result', saturated),
            ]),
            element('feColorMatrix', [('in', saturated), ('type', 'hueRotate'), ('values', self.hue), ('result', result)]),
        ])


def resolve_filter(effects: Optional[VisualEffects]) -> Optional[FilterDescription]:
    """
    Resolve a layer's effects to an ordered filter description.

    Args:
        effects: Effects block (None means no effects)

    Returns:
        FilterDescription with primitives in ``filter_primitive_order`` (shadow, glow, blur,
        color adjustment); None when no effect is enabled and no scalar
        adjustment is present. Stroke is never part of the filter.
    """
    if effects is None:
        return None

    primitives: list[FilterPrimitive] = []
    source = 'SourceGraphic'

    def push(name: str, markup: Optional[str]) -> None:
        nonlocal source
        if markup:
            primitives.append(FilterPrimitive(name=name, markup=markup, result=name))
            source = name

    def blur(src: str, result: str) -> Optional[str]:
        if effects.blur <= 0:
            return None
        return element('feGaussianBlur', [('in', src), ('stdDeviation', effects.blur), ('result', result)])

    def adjust(src: str, result: str) -> Optional[str]:
        if not effects.has_color_adjustment():
            return None
        return effects.color_adjustment_primitive(src, result)

    builders = {
        effects.shadow.effect_type: effects.shadow.to_svg_primitive,
        effects.glow.effect_type: effects.glow.to_svg_primitive,
        'blur': blur,
        'adjust': adjust,
    }
    for name in filter_primitive_order:
        push(name, builders[name](source, name))

    if not primitives:
        return None

    logger.debug(f"Resolved filter with primitives {[p.name for p in primitives]}")
    return FilterDescription(primitives=primitives)
