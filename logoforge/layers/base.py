"""
BaseLayer - Base model for all layer types.

Provides shared properties for all layers:
- Identity: id, name, type
- Appearance: visible, locked, opacity, blendMode
- Paint order: zIndex
- Transform, effects and animation blocks

Uses Pydantic v2 with camelCase aliases for JSON compatibility with the
saved project format. No range validation happens here: sizes, opacity
and the like are stored as given.
"""

from enum import Enum
from typing import Any, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field

from logoforge.animation import AnimationSettings
from logoforge.color import ColorSettings
from logoforge.effects import VisualEffects
from logoforge.transform import LayerTransform


class LayerType(str, Enum):
    """Layer type identifiers."""
    TEXT = "text"
    SHAPE = "shape"
    ICON = "icon"
    BACKGROUND = "background"


class BlendMode(str, Enum):
    NORMAL = "normal"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"
    SOFT_LIGHT = "soft-light"
    HARD_LIGHT = "hard-light"


def generate_layer_id() -> str:
    """Create an opaque unique layer id."""
    return f"layer_{uuid.uuid4().hex}"


class BaseLayer(BaseModel):
    """
    Base model for all layer types.

    Serializes to:
    {
        "id": "layer_...",
        "name": "Layer",
        "type": "shape",
        "visible": true,
        "locked": false,
        "opacity": 1.0,
        "blendMode": "normal",
        "zIndex": 0,
        "transform": {...},
        "effects": {...},
        "animation": {...}
    }
    """

    model_config = ConfigDict(
        # Allow both snake_case and camelCase input
        populate_by_name=True,
        # Don't validate on assignment, values are not range checked
        validate_assignment=False,
        # Allow extra fields for forward compatibility
        extra='ignore',
        # Serialize enums by value
        use_enum_values=True,
    )

    # Overridden in subclasses with Literal types
    layer_type: str = Field(default="shape", alias="type")
    id: str = Field(default_factory=generate_layer_id)
    name: str = Field(default='Layer')

    # Appearance
    visible: bool = Field(default=True)
    locked: bool = Field(default=False)
    opacity: float = Field(default=1.0)
    blend_mode: BlendMode = Field(default=BlendMode.NORMAL, alias='blendMode')

    # Paint order, larger paints later (on top). Not necessarily contiguous.
    z_index: int = Field(default=0, alias='zIndex')

    transform: LayerTransform = Field(default_factory=LayerTransform)
    effects: VisualEffects = Field(default_factory=VisualEffects)
    animation: AnimationSettings = Field(default_factory=AnimationSettings)

    def to_api_dict(self) -> dict[str, Any]:
        """Convert to a camelCase JSON-ready dictionary."""
        return self.model_dump(by_alias=True, mode='json')

    @classmethod
    def from_api_dict(cls, data: dict[str, Any]) -> 'BaseLayer':
        """
        Create layer from a serialized dictionary.

        Accepts both camelCase and snake_case keys and builds the class
        matching ``data['type']``.
        """
        # Import here to avoid circular imports
        from logoforge.layers import layer_from_dict
        return layer_from_dict(data)

    @property
    def position(self) -> tuple[float, float]:
        """Layer position (the transform's x/y)."""
        return (self.transform.x, self.transform.y)

    def paint_fields(self) -> list[tuple[str, ColorSettings]]:
        """
        Paints this layer actually draws with, as ``(role, settings)``.

        The compiler scans these for gradient definitions. Roles are
        ``fill``, ``color`` or ``stroke``.
        """
        return []

    def stroke_paint(self) -> Optional[tuple[ColorSettings, float]]:
        """Active stroke as ``(color, width)``, or None when not stroked."""
        return None

    def has_animation(self) -> bool:
        return self.animation is not None and self.animation.is_active()
