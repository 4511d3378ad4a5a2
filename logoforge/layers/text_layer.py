"""
TextLayer - A single line of text.

Font attributes are written to the markup verbatim, nothing here knows
whether a font family exists.
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from logoforge.color import ColorSettings
from .base import BaseLayer


class FontSettings(BaseModel):
    """Typography of a text layer."""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    family: str = Field(default='Inter')
    size: float = Field(default=32)
    weight: Union[int, str] = Field(default=400)
    style: str = Field(default='normal')  # normal, italic, oblique
    line_height: float = Field(default=1.2, alias='lineHeight')
    letter_spacing: float = Field(default=0, alias='letterSpacing')
    word_spacing: float = Field(default=0, alias='wordSpacing')
    text_transform: str = Field(default='none', alias='textTransform')
    text_decoration: str = Field(default='none', alias='textDecoration')


class TextLayer(BaseLayer):
    """
    Text layer.

    Serialization format:
    {
        "type": "text",
        "content": "Hello",
        "font": {"family": "Inter", "size": 32, "weight": 400, ...},
        "color": {"type": "solid", "solid": "#000000", ...},
        "textAlign": "center",
        "verticalAlign": "middle",
        ...base layer properties
    }
    """

    layer_type: Literal["text"] = Field(default="text", alias="type")
    name: str = Field(default='Text Layer')

    content: str = Field(default='')
    font: FontSettings = Field(default_factory=FontSettings)
    color: ColorSettings = Field(default_factory=ColorSettings)
    text_align: str = Field(default='center', alias='textAlign')  # left, center, right, justify
    vertical_align: str = Field(default='middle', alias='verticalAlign')  # top, middle, bottom
    max_width: Optional[float] = Field(default=None, alias='maxWidth')
    auto_resize: bool = Field(default=True, alias='autoResize')

    def paint_fields(self) -> list[tuple[str, ColorSettings]]:
        fields = [('color', self.color)]
        stroke = self.stroke_paint()
        if stroke is not None:
            fields.append(('stroke', stroke[0]))
        return fields

    def stroke_paint(self) -> Optional[tuple[ColorSettings, float]]:
        stroke = self.effects.stroke if self.effects is not None else None
        if stroke is None or not stroke.is_active():
            return None
        return (stroke.color, stroke.width)
