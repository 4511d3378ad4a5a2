"""
Bounded undo/redo history of scene snapshots.

The log is linear: pushing while the pointer is not at the newest entry
discards everything after the pointer first. When the log grows past
``max_size`` the oldest entries are evicted. It is never empty, the
first entry is the scene it was created with.
"""

import logging
import re
import time
import uuid
from dataclasses import dataclass, field
from typing import Optional

from logoforge.config import settings
from logoforge.scene import Scene

logger = logging.getLogger(__name__)

INITIAL_ACTION = 'Initial'
INITIAL_DESCRIPTION = 'Initial state'


def describe_action(action: str) -> str:
    """``"add_text layer"`` -> ``"Add Text Layer"``."""
    return re.sub(r'\b\w', lambda m: m.group(0).upper(), action.replace('_', ' '))


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class HistoryEntry:
    """One committed scene state."""
    scene: Scene
    action: str
    description: str
    id: str = field(default_factory=lambda: f"entry-{uuid.uuid4().hex}")
    timestamp: int = field(default_factory=_now_ms)


class HistoryLog:
    """
    Snapshot log with a movable pointer.

    Args:
        initial_scene: Scene recorded as the "Initial" entry
        max_size: Maximum number of entries (settings.HISTORY_MAX_SIZE if omitted)

    Raises:
        ValueError: If max_size is smaller than 1
    """

    def __init__(self, initial_scene: Scene, max_size: Optional[int] = None):
        self.max_size = settings.HISTORY_MAX_SIZE if max_size is None else max_size
        if self.max_size < 1:
            raise ValueError(f"History max_size must be at least 1, got {self.max_size}")
        self._entries: list[HistoryEntry] = []
        self._index = -1
        self._seed(initial_scene)

    def _seed(self, scene: Scene) -> None:
        self._entries = [HistoryEntry(
            scene=scene.snapshot(),
            action=INITIAL_ACTION,
            description=INITIAL_DESCRIPTION,
        )]
        self._index = 0

    # -- State --

    @property
    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current(self) -> HistoryEntry:
        return self._entries[self._index]

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def __len__(self) -> int:
        return len(self._entries)

    def labels(self) -> list[str]:
        """Action labels, oldest first."""
        return [entry.action for entry in self._entries]

    # -- Transitions --

    def push(self, scene: Scene, action: str) -> HistoryEntry:
        """
        Record a new state after the current pointer.

        Entries after the pointer are dropped, and the oldest entries are
        evicted once the log exceeds ``max_size``.
        """
        if self.can_redo:
            dropped = len(self._entries) - self._index - 1
            del self._entries[self._index + 1:]
            logger.debug(f"Discarded {dropped} redo entr{'y' if dropped == 1 else 'ies'}")

        entry = HistoryEntry(
            scene=scene.snapshot(),
            action=action,
            description=describe_action(action),
        )
        self._entries.append(entry)

        overflow = len(self._entries) - self.max_size
        if overflow > 0:
            del self._entries[:overflow]
            logger.warning(f"History full, evicted {overflow} oldest entr{'y' if overflow == 1 else 'ies'}")

        self._index = len(self._entries) - 1
        return entry

    def undo(self) -> Optional[HistoryEntry]:
        """Step back one entry. Returns None when already at the oldest."""
        if not self.can_undo:
            return None
        self._index -= 1
        return self._entries[self._index]

    def redo(self) -> Optional[HistoryEntry]:
        """Step forward one entry. Returns None when already at the newest."""
        if not self.can_redo:
            return None
        self._index += 1
        return self._entries[self._index]

    def jump_to(self, index: int) -> Optional[HistoryEntry]:
        """Move the pointer to ``index``. Out-of-range indexes are ignored."""
        if not 0 <= index < len(self._entries):
            return None
        self._index = index
        return self._entries[index]

    def clear(self, scene: Optional[Scene] = None) -> None:
        """
        Forget all entries.

        ``scene`` becomes the new initial entry; without it the current
        state is kept.
        """
        self._seed(scene if scene is not None else self.current.scene)
