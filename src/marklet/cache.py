"""Recently parsed documents, kept by a Markdown instance.

A rendering collaborator re-parses every time its displayed content is set,
and the same content often comes back, for instance when an observer fires
with an unchanged value. ``Markdown`` keeps its last few documents keyed by
source so those re-parses become lookups.

The configuration is fixed per ``Markdown`` instance, so it is not part of
the key. A ``text_transformer`` is assumed to be deterministic.

Thread Safety:
    LRUParseCache guards its table with a lock; one instance may serve
    several threads. Cached Documents are immutable and safe to share.

Example:
    >>> from marklet import Markdown
    >>> md = Markdown(cache_size=8)
    >>> md.parse("# Hello") is md.parse("# Hello")
    True
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import TYPE_CHECKING

from marklet.errors import ConfigError
from marklet.utils.hashing import hash_str

if TYPE_CHECKING:
    from marklet.nodes import Document


class LRUParseCache:
    """Bounded cache of parsed documents, least recently used evicted first."""

    __slots__ = ("_data", "_lock", "_maxsize")

    def __init__(self, maxsize: int = 32) -> None:
        if maxsize < 1:
            raise ConfigError("cache_size", "must be at least 1")
        self._maxsize = maxsize
        self._data: OrderedDict[str, Document] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def maxsize(self) -> int:
        return self._maxsize

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def get(self, key: str) -> Document | None:
        """Return the cached Document for key and mark it recently used."""
        with self._lock:
            doc = self._data.get(key)
            if doc is not None:
                self._data.move_to_end(key)
            return doc

    def put(self, key: str, doc: Document) -> None:
        """Store doc under key, evicting the oldest entries past maxsize."""
        with self._lock:
            self._data[key] = doc
            self._data.move_to_end(key)
            while len(self._data) > self._maxsize:
                self._data.popitem(last=False)

    def clear(self) -> None:
        """Drop every cached Document."""
        with self._lock:
            self._data.clear()


def cache_key(source: str, source_file: str | None = None) -> str:
    """Digest identifying source text and the file it was read from.

    The file name is part of the key because it is recorded in every node
    location.
    """
    if source_file is None:
        return hash_str(source)
    return hash_str(f"{source_file}\0{source}")


__all__ = [
    "LRUParseCache",
    "cache_key",
]
