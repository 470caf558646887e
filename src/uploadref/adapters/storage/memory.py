"""In-memory storage backend.

This module provides a tiny, dependency-free `Storage` implementation meant
for **tests**, examples, and local development. Object paths are kept in a
set; there are no object bodies and no persistence across process restarts.

Exports
-------
- MemoryStorage: Concrete `Storage` backed by an in-memory set of paths.

Key behaviors
-------------
- **Path normalization**: paths are compared after stripping leading and
  trailing ``/``, so ``"tmp/abc"`` and ``"/tmp/abc/"`` name the same object.
- **Thread-safety**: all reads and writes happen under an `RLock`.

Typical usage
-------------
    storage = MemoryStorage()
    storage.put("tmp/85e16d7b-58ed-43bc-8dce-7d3ff7d69f41")
    storage.exists("tmp/85e16d7b-58ed-43bc-8dce-7d3ff7d69f41")  # True
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from uploadref.interfaces.storage import InvalidPathError, Storage

__all__ = ["MemoryStorage"]


class MemoryStorage(Storage):
    """In-memory `Storage` holding a set of object paths."""

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._paths: set[str] = set()
        self._lock = threading.RLock()
        for path in paths:
            self.put(path)

    # ---- Storage ----

    def exists(self, path: str) -> bool:
        key = self._normalize(path)
        with self._lock:
            return key in self._paths

    # ---- In-memory helpers ----

    def put(self, path: str) -> None:
        """Record an object at ``path``. Idempotent."""
        key = self._normalize(path)
        with self._lock:
            self._paths.add(key)

    def discard(self, path: str) -> None:
        """Forget the object at ``path``. No-op if absent."""
        key = self._normalize(path)
        with self._lock:
            self._paths.discard(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._paths)

    @staticmethod
    def _normalize(path: str) -> str:
        key = path.strip("/")
        if not key:
            raise InvalidPathError(path, "empty path")
        return key
