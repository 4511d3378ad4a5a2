"""Test fixtures for logoforge.

Everything here is in-process: scenes are built directly from the
models, the session uses the in-memory ports.
"""

import pytest

from logoforge.color import ColorSettings
from logoforge.editor import (
    EditorSession,
    MemoryBlobSink,
    MemoryClipboard,
    MemoryKeyValueStore,
)
from logoforge.layers import BackgroundLayer, TextLayer
from logoforge.rendering import SceneCompiler
from logoforge.scene import CanvasSettings, Scene


@pytest.fixture
def compiler() -> SceneCompiler:
    return SceneCompiler()


@pytest.fixture
def small_canvas() -> CanvasSettings:
    """100x100 white canvas."""
    return CanvasSettings(width=100, height=100, background_color='#ffffff')


@pytest.fixture
def hello_scene(small_canvas) -> Scene:
    """White background plus a "Hi" text layer on top."""
    return Scene(
        canvas_settings=small_canvas,
        layers=[
            BackgroundLayer(id='bg', fill=ColorSettings.from_hex('#ffffff'), z_index=0),
            TextLayer(id='title', content='Hi', z_index=1),
        ],
    )


@pytest.fixture
def session() -> EditorSession:
    """Editor session on an empty 400x400 scene."""
    return EditorSession(Scene(canvas_settings=CanvasSettings(width=400, height=400)))


@pytest.fixture
def blob_sink() -> MemoryBlobSink:
    return MemoryBlobSink()


@pytest.fixture
def clipboard() -> MemoryClipboard:
    return MemoryClipboard()


@pytest.fixture
def kv_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()
