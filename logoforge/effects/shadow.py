"""Drop shadow effect."""
from typing import ClassVar, Optional

from pydantic import Field

from logoforge.markup import element
from .base import EffectSettings


class ShadowEffect(EffectSettings):
    """Shadow behind the layer content, rendered with ``<feDropShadow>``."""

    effect_type: ClassVar[str] = "shadow"

    offset_x: float = Field(default=0.0, alias='offsetX')
    offset_y: float = Field(default=0.0, alias='offsetY')
    blur: float = Field(default=0.0)
    spread: float = Field(default=0.0)
    color: str = Field(default='#000000')
    opacity: float = Field(default=0.5)
    # No native SVG inset shadow; kept for the editor only
    inset: bool = Field(default=False)

    def to_svg_primitive(self, source: str, result: str) -> Optional[str]:
        if not self.enabled:
            return None
        return element('feDropShadow', [
            ('in', source),
            ('dx', self.offset_x),
            ('dy', self.offset_y),
            ('stdDeviation', self.blur),
            ('flood-color', self.color),
            ('flood-opacity', self.opacity),
            ('result', result),
        ])

    def __repr__(self) -> str:
        return (
            f"ShadowEffect(enabled={self.enabled}, offset=({self.offset_x}, {self.offset_y}), "
            f"blur={self.blur}, color={self.color}, opacity={self.opacity})"
        )
