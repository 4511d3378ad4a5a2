"""
Collaborator interfaces of the editing session.

The session never reaches for files, a clipboard or a key-value store on
its own; the host passes implementations of these interfaces in. The
in-memory variants serve tests and headless use.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class BlobSink(ABC):
    """Destination for exported files (download, disk, object storage)."""

    @abstractmethod
    def write_blob(self, filename: str, data: bytes, media_type: str) -> None:
        """
        Store an exported payload.

        Args:
            filename: Suggested file name, e.g. ``logo.svg``
            data: Encoded payload
            media_type: MIME type of ``data``
        """
        pass


class ClipboardPort(ABC):
    """Text clipboard."""

    @abstractmethod
    def write_text(self, text: str) -> None:
        pass


class KeyValueStore(ABC):
    """String key-value storage for saved projects."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass


@dataclass
class Blob:
    filename: str
    data: bytes
    media_type: str


class MemoryBlobSink(BlobSink):
    """Keeps every written blob in ``blobs``."""

    def __init__(self):
        self.blobs: list[Blob] = []

    def write_blob(self, filename: str, data: bytes, media_type: str) -> None:
        self.blobs.append(Blob(filename=filename, data=data, media_type=media_type))

    @property
    def last(self) -> Optional[Blob]:
        return self.blobs[-1] if self.blobs else None


class MemoryClipboard(ClipboardPort):
    def __init__(self):
        self.text: Optional[str] = None

    def write_text(self, text: str) -> None:
        self.text = text


class MemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._data
