"""
Layer transforms.

A LayerTransform holds position, rotation (degrees), scale and skew.
``compose_transform`` folds it into one SVG transform list in the fixed
order translate, rotate, scale, skewX, skewY. Identity components are
left out, and a fully identity transform yields ``None`` so that no
empty ``transform`` attribute is written.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from logoforge.markup import format_number


class LayerTransform(BaseModel):
    """
    2D transform of a layer.

    Serialization format:
    {"x": 0, "y": 0, "rotation": 0, "scaleX": 1, "scaleY": 1, "skewX": 0, "skewY": 0}
    """

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    x: float = Field(default=0.0)
    y: float = Field(default=0.0)
    rotation: float = Field(default=0.0)
    scale_x: float = Field(default=1.0, alias='scaleX')
    scale_y: float = Field(default=1.0, alias='scaleY')
    skew_x: float = Field(default=0.0, alias='skewX')
    skew_y: float = Field(default=0.0, alias='skewY')

    def is_identity(self) -> bool:
        """Check if every component is neutral."""
        return compose_transform(self) is None

    def translated(self, dx: float, dy: float) -> 'LayerTransform':
        """Return a copy moved by (dx, dy)."""
        return self.model_copy(update={'x': self.x + dx, 'y': self.y + dy})


def compose_transform(t: Optional[LayerTransform]) -> Optional[str]:
    """
    Compose a transform into a single SVG transform list.

    Args:
        t: Layer transform (None is treated as identity)

    Returns:
        Transform string such as ``"translate(10, 20) rotate(45)"`` or
        None when every component is identity.
    """
    if t is None:
        return None

    parts = []
    if t.x != 0 or t.y != 0:
        parts.append(f"translate({format_number(t.x)}, {format_number(t.y)})")
    if t.rotation != 0:
        parts.append(f"rotate({format_number(t.rotation)})")
    if t.scale_x != 1 or t.scale_y != 1:
        parts.append(f"scale({format_number(t.scale_x)}, {format_number(t.scale_y)})")
    if t.skew_x != 0:
        parts.append(f"skewX({format_number(t.skew_x)})")
    if t.skew_y != 0:
        parts.append(f"skewY({format_number(t.skew_y)})")

    return ' '.join(parts) if parts else None
