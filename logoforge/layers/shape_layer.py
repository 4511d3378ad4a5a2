"""ShapeLayer - Geometric primitive sized by width/height."""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from logoforge.color import ColorSettings
from .base import BaseLayer


class ShapeType(str, Enum):
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    TRIANGLE = "triangle"
    POLYGON = "polygon"
    STAR = "star"
    CUSTOM = "custom"


class ShapeStroke(BaseModel):
    """Outline drawn on the shape element itself."""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    enabled: bool = Field(default=False)
    color: ColorSettings = Field(default_factory=ColorSettings)
    width: float = Field(default=1)


class ShapeLayer(BaseLayer):
    """
    Shape layer.

    Serialization format:
    {
        "type": "shape",
        "shapeType": "rectangle",
        "width": 100,
        "height": 100,
        "fill": {...},
        "cornerRadius": 0,
        "sides": 6,
        "innerRadius": 0.5,
        "path": null,
        "stroke": {"enabled": false, "color": {...}, "width": 1},
        ...base layer properties
    }
    """

    layer_type: Literal["shape"] = Field(default="shape", alias="type")
    name: str = Field(default='Shape Layer')

    shape_type: ShapeType = Field(default=ShapeType.RECTANGLE, alias='shapeType')
    width: float = Field(default=100)
    height: float = Field(default=100)
    fill: ColorSettings = Field(default_factory=lambda: ColorSettings.from_hex('#cccccc'))
    corner_radius: float = Field(default=0, alias='cornerRadius')

    # Polygon / star only
    sides: Optional[int] = Field(default=None)
    inner_radius: Optional[float] = Field(default=None, alias='innerRadius')  # ratio of outer radius

    # Custom shapes only (SVG path data)
    path: Optional[str] = Field(default=None)

    stroke: Optional[ShapeStroke] = Field(default=None)

    def paint_fields(self) -> list[tuple[str, ColorSettings]]:
        fields = [('fill', self.fill)]
        stroke = self.stroke_paint()
        if stroke is not None:
            fields.append(('stroke', stroke[0]))
        return fields

    def stroke_paint(self) -> Optional[tuple[ColorSettings, float]]:
        if self.stroke is None or not self.stroke.enabled or not self.stroke.width > 0:
            return None
        return (self.stroke.color, self.stroke.width)
