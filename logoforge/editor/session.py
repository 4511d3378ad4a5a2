"""
EditorSession - the editing surface of one logo.

Wires the layer store, the history log and the compiler together: every
mutation that changed something is recorded as a history snapshot, and
undo/redo restore a copy of a recorded snapshot into the store. I/O goes
through the collaborator ports handed in by the host.
"""

import logging
from typing import Any, Optional

from logoforge.config import Settings
from logoforge.exceptions import ExportError, ProjectLoadError
from logoforge.formats import ExportSettings, ProjectDocument
from logoforge.layers import BaseLayer
from logoforge.rendering import SceneCompiler
from logoforge.scene import Scene
from .history import HistoryEntry, HistoryLog
from .layer_store import LayerStore
from .ports import BlobSink, ClipboardPort, KeyValueStore

logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = 'image/svg+xml'


class EditorSession:
    """
    One editing session: a live scene with undo/redo and export.

    Args:
        scene: Initial scene (empty scene if omitted)
        compiler: Scene compiler (default compiler if omitted)
        history_size: Maximum history length (settings default if omitted)
        settings: Settings passed on to the layer store
        title: Project title written to saved projects
    """

    def __init__(
        self,
        scene: Optional[Scene] = None,
        compiler: Optional[SceneCompiler] = None,
        history_size: Optional[int] = None,
        settings: Optional[Settings] = None,
        title: str = 'My Logo',
    ):
        self.store = LayerStore(scene, settings=settings)
        self.history = HistoryLog(self.store.scene, max_size=history_size)
        self.compiler = compiler or SceneCompiler()
        self.title = title
        self.export_settings = ExportSettings()

    @property
    def scene(self) -> Scene:
        return self.store.scene

    @property
    def layers(self) -> list[BaseLayer]:
        return self.store.layers

    @property
    def selected_layer_id(self) -> Optional[str]:
        return self.store.selected_layer_id

    def select_layer(self, layer_id: Optional[str]) -> None:
        self.store.select_layer(layer_id)

    def _commit(self, action: str) -> None:
        self.history.push(self.store.scene, action)

    # -- Layer editing --

    def add_layer(self, layer_type: str, content: str = '') -> BaseLayer:
        layer = self.store.add_layer(layer_type, content)
        self._commit(f"Add {layer.layer_type} Layer")
        return layer

    def update_layer(self, layer_id: str, partial: dict[str, Any]) -> bool:
        changed = self.store.update_layer(layer_id, partial)
        if changed:
            self._commit('Update Layer')
        return changed

    def delete_layer(self, layer_id: str) -> bool:
        changed = self.store.delete_layer(layer_id)
        if changed:
            self._commit('Delete Layer')
        return changed

    def duplicate_layer(self, layer_id: str) -> Optional[BaseLayer]:
        clone = self.store.duplicate_layer(layer_id)
        if clone is not None:
            self._commit('Duplicate Layer')
        return clone

    def reorder_layer(self, layer_id: str, new_index: int) -> bool:
        changed = self.store.reorder_layer(layer_id, new_index)
        if changed:
            self._commit('Reorder Layer')
        return changed

    def update_logo_settings(self, partial: dict[str, Any]) -> bool:
        """
        Update canvas settings and/or the title.

        Accepts ``width``, ``height``, ``backgroundColor`` and ``title``.
        """
        partial = dict(partial)
        title = partial.pop('title', None)
        if not partial and title is None:
            return False
        changed = self.store.update_canvas(partial) if partial else True
        if not changed:
            return False
        if title is not None:
            self.title = title
        self._commit('Update Logo Settings')
        return True

    # -- History --

    def _restore(self, entry: Optional[HistoryEntry]) -> Optional[HistoryEntry]:
        if entry is not None:
            self.store.replace_scene(entry.scene.snapshot())
            logger.debug(f"Restored history entry {entry.id} ({entry.action})")
        return entry

    def undo(self) -> Optional[HistoryEntry]:
        return self._restore(self.history.undo())

    def redo(self) -> Optional[HistoryEntry]:
        return self._restore(self.history.redo())

    def jump_to(self, index: int) -> Optional[HistoryEntry]:
        return self._restore(self.history.jump_to(index))

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    # -- Output --

    def render(self) -> str:
        """Compile the live scene to SVG markup."""
        return self.compiler.compile(self.store.scene)

    def export_svg(self, sink: BlobSink, filename: str = 'logo.svg') -> str:
        """
        Write the compiled scene to ``sink`` as UTF-8 SVG.

        Returns:
            The markup written

        Raises:
            ExportError: If the sink fails to store the payload
        """
        markup = self.render()
        try:
            sink.write_blob(filename, markup.encode('utf-8'), SVG_MEDIA_TYPE)
        except OSError as e:
            raise ExportError(f"Failed to export {filename}: {e}") from e
        logger.debug(f"Exported {filename} ({len(markup)} chars)")
        return markup

    def copy_svg(self, clipboard: ClipboardPort) -> str:
        """Place the compiled scene on the clipboard."""
        markup = self.render()
        clipboard.write_text(markup)
        return markup

    # -- Projects --

    def save_project(self, store: KeyValueStore, key: str) -> ProjectDocument:
        document = ProjectDocument.from_scene(
            self.store.scene, title=self.title, export_settings=self.export_settings
        )
        store.set(key, document.to_json())
        logger.debug(f"Saved project '{key}' with {len(document.layers)} layers")
        return document

    def load_project(self, store: KeyValueStore, key: str) -> ProjectDocument:
        """
        Replace the live scene with a saved project.

        The loaded state is recorded as a fresh history start.

        Raises:
            ProjectLoadError: If the key is absent or the document unreadable
        """
        text = store.get(key)
        if text is None:
            raise ProjectLoadError(f"No saved project under '{key}'")

        document = ProjectDocument.from_json(text)
        self.store.replace_scene(document.to_scene())
        self.store.select_layer(None)
        self.title = document.logo_settings.title
        self.export_settings = document.export_settings
        self.history.clear(self.store.scene)
        logger.debug(f"Loaded project '{key}' with {len(document.layers)} layers")
        return document
