"""
IconLayer - A named icon from an external icon set.

The compiler asks an icon renderer for the glyph; without one it draws
a tinted square with the icon name's first letter.
"""

from typing import Literal

from pydantic import Field

from logoforge.color import ColorSettings
from .base import BaseLayer


class IconLayer(BaseLayer):
    """
    Icon layer.

    Serialization format:
    {
        "type": "icon",
        "iconName": "star",
        "iconSet": "lucide",
        "size": 48,
        "color": {...},
        ...base layer properties
    }
    """

    layer_type: Literal["icon"] = Field(default="icon", alias="type")
    name: str = Field(default='Icon Layer')

    icon_name: str = Field(default='', alias='iconName')
    icon_set: str = Field(default='lucide', alias='iconSet')
    size: float = Field(default=48)
    color: ColorSettings = Field(default_factory=lambda: ColorSettings.from_hex('#333333'))

    def paint_fields(self) -> list[tuple[str, ColorSettings]]:
        return [('color', self.color)]
