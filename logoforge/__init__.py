"""
Logoforge - layered logo scenes compiled to SVG, with undo/redo editing
"""

from .color import ColorSettings, ColorStop, GradientSettings, PaintReference, resolve_paint
from .transform import LayerTransform, compose_transform
from .animation import AnimationSettings
from .effects import FilterDescription, FilterPrimitive, VisualEffects, resolve_filter
from .layers import (
    BackgroundLayer,
    BaseLayer,
    IconLayer,
    Layer,
    ShapeLayer,
    TextLayer,
    layer_from_dict,
)
from .scene import CanvasSettings, Scene
from .rendering import SceneCompiler, compile_scene
from .editor import EditorSession, HistoryEntry, HistoryLog, LayerStore
from .formats import ProjectDocument
from .exceptions import ExportError, LogoforgeError, ProjectLoadError

__version__ = "0.1.0"

__all__ = [
    # Color
    "ColorSettings",
    "ColorStop",
    "GradientSettings",
    "PaintReference",
    "resolve_paint",
    # Transform and animation
    "LayerTransform",
    "compose_transform",
    "AnimationSettings",
    # Effects
    "VisualEffects",
    "FilterDescription",
    "FilterPrimitive",
    "resolve_filter",
    # Layers and scene
    "BaseLayer",
    "Layer",
    "TextLayer",
    "ShapeLayer",
    "IconLayer",
    "BackgroundLayer",
    "layer_from_dict",
    "CanvasSettings",
    "Scene",
    # Rendering
    "SceneCompiler",
    "compile_scene",
    # Editing
    "LayerStore",
    "HistoryLog",
    "HistoryEntry",
    "EditorSession",
    "ProjectDocument",
    # Errors
    "LogoforgeError",
    "ProjectLoadError",
    "ExportError",
]
