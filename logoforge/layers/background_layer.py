"""
BackgroundLayer - Fills the whole canvas.

Backgrounds ignore their transform: they always cover
``canvas.width x canvas.height`` from the origin.
"""

from typing import Literal, Optional

from pydantic import Field

from logoforge.color import ColorSettings
from .base import BaseLayer


class BackgroundLayer(BaseLayer):
    """
    Background layer.

    Serialization format:
    {
        "type": "background",
        "fill": {...},
        "pattern": null,
        "patternScale": 1,
        ...base layer properties
    }
    """

    layer_type: Literal["background"] = Field(default="background", alias="type")
    name: str = Field(default='Background')

    fill: ColorSettings = Field(default_factory=lambda: ColorSettings.from_hex('#ffffff'))
    pattern: Optional[str] = Field(default=None)
    pattern_scale: float = Field(default=1.0, alias='patternScale')

    def paint_fields(self) -> list[tuple[str, ColorSettings]]:
        return [('fill', self.fill)]
