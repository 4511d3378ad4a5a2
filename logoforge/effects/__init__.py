"""
Visual Effects Module

Effect settings of a layer and their resolution to SVG filter
descriptions. Each effect is in its own file.
"""

from .base import EffectSettings
from .filter import FilterDescription, FilterPrimitive
from .glow import GlowEffect
from .shadow import ShadowEffect
from .stroke import StrokeEffect, StrokePosition
from .visual_effects import VisualEffects, filter_primitive_order, resolve_filter

__all__ = [
    'EffectSettings',
    'FilterDescription',
    'FilterPrimitive',
    'GlowEffect',
    'ShadowEffect',
    'StrokeEffect',
    'StrokePosition',
    'VisualEffects',
    'resolve_filter',
    'filter_primitive_order',
]
