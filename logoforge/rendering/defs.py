"""
Definitions for the ``<defs>`` block.

Every visible layer is planned once: its paints are resolved (minting
one gradient id per gradient occurrence) and its effects are resolved to
a filter. The plans feed both the defs block and the layer fragments,
so a hidden layer, which is never planned, leaves no defs behind.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from logoforge.color import PaintReference, resolve_paint
from logoforge.effects import FilterDescription, resolve_filter
from logoforge.layers import BaseLayer


def gradient_id_for(layer_id: str, role: str) -> str:
    """Def id of the gradient painting ``role`` of a layer."""
    return f"gradient-{layer_id}-{role}"


def filter_id_for(layer_id: str) -> str:
    """Def id of a layer's filter."""
    return f"filter-{layer_id}"


@dataclass
class LayerPlan:
    """Resolved paints and filter of one visible layer."""
    layer: BaseLayer
    paints: dict[str, PaintReference] = field(default_factory=dict)
    filter: Optional[FilterDescription] = None

    @property
    def filter_id(self) -> Optional[str]:
        return filter_id_for(self.layer.id) if self.filter is not None else None

    def paint(self, role: str) -> Optional[PaintReference]:
        return self.paints.get(role)


def plan_layer(layer: BaseLayer) -> LayerPlan:
    """Resolve every paint the layer draws with and its filter."""
    paints = {}
    for role, color in layer.paint_fields():
        if color is None:
            continue
        paints[role] = resolve_paint(color, gradient_id_for(layer.id, role))
    return LayerPlan(layer=layer, paints=paints, filter=resolve_filter(layer.effects))


def paint_order(layers: Iterable[BaseLayer]) -> list[BaseLayer]:
    """
    Visible layers in paint order.

    Sorted by ascending zIndex; the sort is stable so ties keep their
    array order.
    """
    return sorted((layer for layer in layers if layer.visible is True), key=lambda layer: layer.z_index)


def gradient_defs(plans: Iterable[LayerPlan]) -> list[str]:
    """One gradient element per gradient occurrence, in paint order."""
    defs = []
    for plan in plans:
        for paint in plan.paints.values():
            if paint.needs_def:
                defs.append(paint.gradient.to_svg_gradient(paint.gradient_id))
    return defs


def filter_defs(plans: Iterable[LayerPlan]) -> list[str]:
    """One ``<filter>`` per layer that needs one, in paint order."""
    return [
        plan.filter.to_svg_filter(plan.filter_id)
        for plan in plans
        if plan.filter is not None
    ]
