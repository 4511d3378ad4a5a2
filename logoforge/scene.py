"""
Scene - canvas settings plus an ordered layer collection.

The scene is the unit that gets compiled to markup and snapshotted into
the history log. Layer ids are unique within a scene.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from logoforge.config import settings
from logoforge.layers import BaseLayer, Layer


class CanvasSettings(BaseModel):
    """Canvas size and background color."""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    width: float = Field(default_factory=lambda: settings.DEFAULT_CANVAS_WIDTH)
    height: float = Field(default_factory=lambda: settings.DEFAULT_CANVAS_HEIGHT)
    background_color: str = Field(
        default_factory=lambda: settings.DEFAULT_BACKGROUND_COLOR, alias='backgroundColor'
    )


class Scene(BaseModel):
    """
    Full editable state.

    Serialization format:
    {
        "canvasSettings": {"width": 400, "height": 400, "backgroundColor": "#ffffff"},
        "layers": [...]
    }
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=False,
        extra='ignore',
    )

    canvas_settings: CanvasSettings = Field(default_factory=CanvasSettings, alias='canvasSettings')
    layers: list[Layer] = Field(default_factory=list)

    def get_layer(self, layer_id: str) -> Optional[BaseLayer]:
        """
        Get a layer by ID.

        Args:
            layer_id: Layer ID to find

        Returns:
            Layer or None if not found
        """
        for layer in self.layers:
            if layer.id == layer_id:
                return layer
        return None

    def index_of(self, layer_id: str) -> int:
        """Array position of a layer, or -1 if not found."""
        for index, layer in enumerate(self.layers):
            if layer.id == layer_id:
                return index
        return -1

    def layer_ids(self) -> list[str]:
        return [layer.id for layer in self.layers]

    def snapshot(self) -> 'Scene':
        """Deep, independent copy of this scene."""
        return self.model_copy(deep=True)

    def to_api_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode='json')

    @classmethod
    def from_api_dict(cls, data: dict[str, Any]) -> 'Scene':
        return cls.model_validate(data)
