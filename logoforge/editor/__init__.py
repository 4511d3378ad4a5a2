"""
Editor

The editing surface over a scene: layer CRUD (LayerStore), bounded
undo/redo (HistoryLog) and the session that ties both to the compiler
and to the host's I/O ports.
"""

from .history import HistoryEntry, HistoryLog, describe_action
from .layer_store import LayerStore
from .ports import (
    Blob,
    BlobSink,
    ClipboardPort,
    KeyValueStore,
    MemoryBlobSink,
    MemoryClipboard,
    MemoryKeyValueStore,
)
from .session import EditorSession

__all__ = [
    'LayerStore',
    'HistoryLog',
    'HistoryEntry',
    'describe_action',
    'EditorSession',
    'Blob',
    'BlobSink',
    'ClipboardPort',
    'KeyValueStore',
    'MemoryBlobSink',
    'MemoryClipboard',
    'MemoryKeyValueStore',
]
