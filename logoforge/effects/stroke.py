"""Stroke effect."""
from enum import Enum
from typing import ClassVar, Optional

from pydantic import Field

from logoforge.color import ColorSettings
from .base import EffectSettings


class StrokePosition(str, Enum):
    INSIDE = "inside"
    CENTER = "center"
    OUTSIDE = "outside"


class StrokeEffect(EffectSettings):
    """
    Outline around the layer content.

    Not a filter primitive: the compiler writes it as ``stroke`` and
    ``stroke-width`` on the element itself.
    """

    effect_type: ClassVar[str] = "stroke"

    width: float = Field(default=1.0)
    color: ColorSettings = Field(default_factory=ColorSettings)
    position: StrokePosition = Field(default=StrokePosition.OUTSIDE)
    dash_array: Optional[list[float]] = Field(default=None, alias='dashArray')

    def is_active(self) -> bool:
        return self.enabled and self.width > 0

    def to_svg_primitive(self, source: str, result: str) -> Optional[str]:
        return None
