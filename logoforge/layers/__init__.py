"""
Logoforge Layer Models

Layer Hierarchy:
    BaseLayer
    ├── TextLayer (type: 'text')
    ├── ShapeLayer (type: 'shape')
    ├── IconLayer (type: 'icon')
    └── BackgroundLayer (type: 'background')

``Layer`` is the tagged union of the four variants, discriminated by
``type``.
"""

from typing import Annotated, Union

from pydantic import Field

from .base import BaseLayer, BlendMode, LayerType, generate_layer_id
from .background_layer import BackgroundLayer
from .icon_layer import IconLayer
from .shape_layer import ShapeLayer, ShapeStroke, ShapeType
from .text_layer import FontSettings, TextLayer

Layer = Annotated[
    Union[TextLayer, ShapeLayer, IconLayer, BackgroundLayer],
    Field(discriminator='layer_type'),
]

# Layer type registry for deserialization
_LAYER_REGISTRY: dict[str, type[BaseLayer]] = {
    'text': TextLayer,
    'shape': ShapeLayer,
    'icon': IconLayer,
    'background': BackgroundLayer,
}


def get_layer_class(layer_type: str) -> type[BaseLayer]:
    """
    Get the layer class for a layer type.

    Args:
        layer_type: Layer type string ('text', 'shape', 'icon', 'background')

    Returns:
        Layer class

    Raises:
        ValueError: If the type is unknown
    """
    layer_class = _LAYER_REGISTRY.get(layer_type)
    if layer_class is None:
        raise ValueError(f"Unknown layer type: {layer_type}")
    return layer_class


def layer_from_dict(data: dict) -> BaseLayer:
    """
    Create a layer instance from a serialized dictionary.

    Args:
        data: Serialized layer data

    Returns:
        Layer instance of the appropriate type
    """
    layer_class = get_layer_class(data.get('type', 'shape'))
    return layer_class.model_validate(data)


__all__ = [
    'BaseLayer',
    'BlendMode',
    'LayerType',
    'Layer',
    'TextLayer',
    'FontSettings',
    'ShapeLayer',
    'ShapeStroke',
    'ShapeType',
    'IconLayer',
    'BackgroundLayer',
    'generate_layer_id',
    'get_layer_class',
    'layer_from_dict',
]
