"""
LayerStore - owns the live scene and its layer CRUD operations.

Every operation tolerates unknown layer ids: nothing happens and no
exception is raised. Mutators additionally report whether anything
changed so callers that care can check.
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from logoforge.config import Settings, settings as default_settings
from logoforge.layers import BaseLayer, LayerType, generate_layer_id, get_layer_class
from logoforge.scene import CanvasSettings, Scene

logger = logging.getLogger(__name__)

# Keys an update may never change
IMMUTABLE_KEYS = frozenset({'id', 'type', 'layer_type'})

DEFAULT_TEXT_CONTENT = 'New Text'


def _field_name(model_class: type, key: str) -> Optional[str]:
    """Map an alias or attribute name to the model's attribute name."""
    fields = model_class.model_fields
    if key in fields:
        return key
    for name, info in fields.items():
        if info.alias == key:
            return name
    return None


def merge_partial(model: Any, partial: dict[str, Any]) -> Any:
    """
    Shallow-merge ``partial`` into ``model`` and return the validated result.

    Top-level keys replace the current value wholesale; nested objects
    are not merged. Unknown keys are ignored.

    Raises:
        pydantic.ValidationError: If a value cannot be coerced
    """
    model_class = type(model)
    data = {name: getattr(model, name) for name in model_class.model_fields}
    for key, value in partial.items():
        name = _field_name(model_class, key)
        if name is not None:
            data[name] = value
    return model_class.model_validate(data)


class LayerStore:
    """
    Ordered, heterogeneous layer collection of one editing session.

    Args:
        scene: Initial scene (a new empty scene if omitted)
        settings: Settings to read defaults from (module settings if omitted)
    """

    def __init__(self, scene: Optional[Scene] = None, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self._scene = scene if scene is not None else Scene()
        self.selected_layer_id: Optional[str] = None

    # -- Queries --

    @property
    def scene(self) -> Scene:
        """The live scene. Take ``snapshot()`` before handing it out."""
        return self._scene

    @property
    def layers(self) -> list[BaseLayer]:
        return self._scene.layers

    @property
    def canvas(self) -> CanvasSettings:
        return self._scene.canvas_settings

    @property
    def selected_layer(self) -> Optional[BaseLayer]:
        if self.selected_layer_id is None:
            return None
        return self._scene.get_layer(self.selected_layer_id)

    def get_layer(self, layer_id: str) -> Optional[BaseLayer]:
        return self._scene.get_layer(layer_id)

    def sorted_layers(self) -> list[BaseLayer]:
        """All layers by ascending zIndex (ties keep array order)."""
        return sorted(self.layers, key=lambda layer: layer.z_index)

    def select_layer(self, layer_id: Optional[str]) -> None:
        self.selected_layer_id = layer_id

    def replace_scene(self, scene: Scene) -> None:
        """
        Swap in another scene, e.g. one restored from history.

        The selection is kept only if the layer still exists.
        """
        self._scene = scene
        if self.selected_layer_id is not None and scene.get_layer(self.selected_layer_id) is None:
            self.selected_layer_id = None

    # -- Mutations --

    def _default_position(self, layer_type: str) -> tuple[float, float]:
        canvas = self.canvas
        if layer_type == LayerType.BACKGROUND.value:
            return (0, 0)
        if layer_type == LayerType.SHAPE.value:
            half = self.settings.DEFAULT_SHAPE_SIZE / 2
            return (canvas.width / 2 - half, canvas.height / 2 - half)
        if layer_type == LayerType.ICON.value:
            half = self.settings.DEFAULT_ICON_SIZE / 2
            return (canvas.width / 2 - half, canvas.height / 2 - half)
        return (canvas.width / 2, canvas.height / 2)

    def _default_payload(self, layer_type: str, content: str) -> dict[str, Any]:
        if layer_type == LayerType.TEXT.value:
            return {'content': content or DEFAULT_TEXT_CONTENT}
        if layer_type == LayerType.SHAPE.value:
            size = self.settings.DEFAULT_SHAPE_SIZE
            return {'width': size, 'height': size}
        if layer_type == LayerType.ICON.value:
            payload: dict[str, Any] = {'size': self.settings.DEFAULT_ICON_SIZE}
            if content:
                payload['icon_name'] = content
            return payload
        if layer_type == LayerType.BACKGROUND.value:
            return {'fill': {'type': 'solid', 'solid': self.canvas.background_color}}
        return {}

    def add_layer(self, layer_type: str, content: str = '') -> BaseLayer:
        """
        Append a new layer with default payload and select it.

        Args:
            layer_type: 'text', 'shape', 'icon' or 'background'
            content: Text content for text layers, icon name for icon layers

        Returns:
            The new layer (zIndex = current layer count)

        Raises:
            ValueError: If the layer type is unknown
        """
        layer_type = getattr(layer_type, 'value', layer_type)
        layer_class = get_layer_class(layer_type)
        x, y = self._default_position(layer_type)

        layer = layer_class.model_validate({
            'id': generate_layer_id(),
            'z_index': len(self.layers),
            'transform': {'x': x, 'y': y},
            **self._default_payload(layer_type, content),
        })
        self.layers.append(layer)
        self.selected_layer_id = layer.id
        logger.debug(f"Added {layer_type} layer {layer.id} at zIndex {layer.z_index}")
        return layer

    def update_layer(self, layer_id: str, partial: dict[str, Any]) -> bool:
        """
        Shallow-merge ``partial`` into a layer.

        ``id`` and ``type`` are ignored. Keys may be aliases (``zIndex``)
        or attribute names (``z_index``).

        Returns:
            True if the layer was found and updated. False for an unknown
            id or a partial whose values do not fit the layer model.
        """
        index = self._scene.index_of(layer_id)
        if index < 0:
            return False

        partial = {k: v for k, v in partial.items() if k not in IMMUTABLE_KEYS}
        try:
            updated = merge_partial(self.layers[index], partial)
        except ValidationError as e:
            logger.warning(f"Rejected update for layer {layer_id}: {e.error_count()} invalid value(s)")
            return False

        self.layers[index] = updated
        logger.debug(f"Updated layer {layer_id}: {sorted(partial)}")
        return True

    def delete_layer(self, layer_id: str) -> bool:
        """Remove a layer; remaining zIndex values are left as they are."""
        index = self._scene.index_of(layer_id)
        if index < 0:
            return False

        del self.layers[index]
        if self.selected_layer_id == layer_id:
            self.selected_layer_id = None
        logger.debug(f"Deleted layer {layer_id}")
        return True

    def duplicate_layer(self, layer_id: str) -> Optional[BaseLayer]:
        """
        Clone a layer with a fresh id, offset position and zIndex = layer count.

        The clone is appended and selected.

        Returns:
            The clone, or None if the id is unknown
        """
        source = self.get_layer(layer_id)
        if source is None:
            return None

        offset = self.settings.DUPLICATE_OFFSET
        clone = source.model_copy(deep=True, update={
            'id': generate_layer_id(),
            'name': f"{source.name}{self.settings.DUPLICATE_SUFFIX}",
            'z_index': len(self.layers),
            'transform': source.transform.translated(offset, offset),
        })
        self.layers.append(clone)
        self.selected_layer_id = clone.id
        logger.debug(f"Duplicated layer {layer_id} as {clone.id}")
        return clone

    def reorder_layer(self, layer_id: str, new_index: int) -> bool:
        """
        Move a layer to ``new_index`` and renumber every zIndex to 0..n-1.

        ``new_index`` is clamped to the valid range.
        """
        index = self._scene.index_of(layer_id)
        if index < 0:
            return False

        layers = self.layers
        moved = layers.pop(index)
        target = max(0, min(new_index, len(layers)))
        layers.insert(target, moved)
        for position, layer in enumerate(layers):
            layer.z_index = position
        logger.debug(f"Moved layer {layer_id} from {index} to {target}")
        return True

    def update_canvas(self, partial: dict[str, Any]) -> bool:
        """
        Shallow-merge canvas settings (width, height, backgroundColor).

        Returns:
            False if a value does not fit the canvas model
        """
        try:
            self._scene.canvas_settings = merge_partial(self.canvas, partial)
        except ValidationError as e:
            logger.warning(f"Rejected canvas update: {e.error_count()} invalid value(s)")
            return False
        return True
