"""
Color settings and paint resolution.

A ColorSettings is a tagged choice between a solid color, a gradient and
a pattern reference. Only the paint named by ``type`` is active; the
others are kept so the editor can switch back without losing state.

Gradients need a ``<defs>`` entry. The compiler mints one id per
occurrence and passes it to ``resolve_paint``; nothing here is
de-duplicated and nothing is validated (malformed colors pass through).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from logoforge.markup import element, format_number


class ColorType(str, Enum):
    """Paint kinds of a ColorSettings."""
    SOLID = "solid"
    GRADIENT = "gradient"
    PATTERN = "pattern"


class GradientType(str, Enum):
    """Gradient geometries. Conic is approximated with a radial gradient."""
    LINEAR = "linear"
    RADIAL = "radial"
    CONIC = "conic"


class ColorStop(BaseModel):
    """A single gradient stop; ``position`` is a percentage (0-100)."""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    color: str = Field(default='#000000')
    position: float = Field(default=0.0)
    opacity: Optional[float] = Field(default=None)

    def to_svg(self) -> str:
        return element('stop', [
            ('offset', f"{format_number(self.position)}%"),
            ('stop-color', self.color),
            ('stop-opacity', 1 if self.opacity is None else self.opacity),
        ])


class GradientSettings(BaseModel):
    """
    Gradient paint.

    Stops are emitted in array order. They are never sorted by position,
    renderers read them positionally.

    Serialization format:
    {
        "type": "linear",
        "angle": 90,
        "centerX": 50,
        "centerY": 50,
        "stops": [{"color": "#ff0000", "position": 0, "opacity": 1}]
    }
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=False,
        extra='ignore',
        use_enum_values=True,
    )

    gradient_type: GradientType = Field(default=GradientType.LINEAR, alias='type')
    angle: float = Field(default=0.0)
    center_x: float = Field(default=50.0, alias='centerX')
    center_y: float = Field(default=50.0, alias='centerY')
    stops: list[ColorStop] = Field(default_factory=list)

    def to_svg_gradient(self, gradient_id: str) -> str:
        """
        Generate the ``<defs>`` entry for this gradient.

        Args:
            gradient_id: Unique ID for the gradient element

        Returns:
            linearGradient or radialGradient element as string
        """
        stops = ''.join(stop.to_svg() for stop in self.stops)

        if self.gradient_type == GradientType.LINEAR.value:
            return element('linearGradient', [
                ('id', gradient_id),
                ('x1', '0%'),
                ('y1', '0%'),
                ('x2', '100%'),
                ('y2', '0%'),
                ('gradientTransform', f"rotate({format_number(self.angle)}, 0.5, 0.5)"),
            ], stops)

        # Radial and conic (SVG has no conic gradient)
        return element('radialGradient', [
            ('id', gradient_id),
            ('cx', f"{format_number(self.center_x)}%"),
            ('cy', f"{format_number(self.center_y)}%"),
            ('r', '50%'),
        ], stops)


class ColorSettings(BaseModel):
    """
    Tagged paint choice.

    Serialization format:
    {
        "type": "solid",
        "solid": "#000000",
        "gradient": {...},
        "pattern": null,
        "opacity": 1
    }
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=False,
        extra='ignore',
        use_enum_values=True,
    )

    color_type: ColorType = Field(default=ColorType.SOLID, alias='type')
    solid: str = Field(default='#000000')
    gradient: GradientSettings = Field(default_factory=GradientSettings)
    pattern: Optional[str] = Field(default=None)
    opacity: float = Field(default=1.0)

    @classmethod
    def from_hex(cls, color: str, opacity: float = 1.0) -> 'ColorSettings':
        """Create a solid paint."""
        return cls(color_type=ColorType.SOLID, solid=color, opacity=opacity)

    @classmethod
    def from_gradient(cls, gradient: GradientSettings, opacity: float = 1.0) -> 'ColorSettings':
        """Create a gradient paint."""
        return cls(color_type=ColorType.GRADIENT, gradient=gradient, opacity=opacity)

    def is_gradient(self) -> bool:
        return self.color_type == ColorType.GRADIENT.value


@dataclass
class PaintReference:
    """
    Resolved paint ready for a ``fill``/``stroke`` attribute.

    ``gradient`` is set when the reference points at a def the compiler
    still has to emit under ``gradient_id``.
    """
    kind: Literal['solid', 'gradient', 'pattern']
    value: str
    opacity: float = 1.0
    gradient: Optional[GradientSettings] = None
    gradient_id: Optional[str] = None

    @property
    def needs_def(self) -> bool:
        return self.gradient is not None

    def opacity_attr(self) -> Optional[Any]:
        """Paint opacity for ``fill-opacity``/``stroke-opacity``, or None when opaque."""
        if self.opacity is None or self.opacity == 1:
            return None
        return self.opacity


def resolve_paint(color: ColorSettings, paint_id: Optional[str] = None) -> PaintReference:
    """
    Resolve color settings to a paint reference.

    Args:
        color: Paint settings of a layer field
        paint_id: Def id assigned by the compiler for gradient paints

    Returns:
        PaintReference. Gradients without a ``paint_id`` fall back to
        ``gradient-default``.
    """
    if color.color_type == ColorType.SOLID.value:
        return PaintReference(kind='solid', value=color.solid, opacity=color.opacity)

    if color.color_type == ColorType.GRADIENT.value:
        gradient_id = paint_id or 'gradient-default'
        return PaintReference(
            kind='gradient',
            value=f"url(#{gradient_id})",
            opacity=color.opacity,
            gradient=color.gradient,
            gradient_id=gradient_id,
        )

    if color.color_type == ColorType.PATTERN.value:
        key = color.pattern or 'default'
        return PaintReference(kind='pattern', value=f"url(#pattern-{key})", opacity=color.opacity)

    return PaintReference(kind='solid', value='#000000', opacity=color.opacity)
