"""Pytest fixtures for storage contract tests.

Provided fixtures
-----------------
- **backend**: Parametrized over ``"memory"`` and ``"local"``. Returns a
  `StorageBackend` pairing a **fresh** `Storage` with a ``seed(path)``
  callable that creates an object at ``path`` the way that backend expects
  (a set entry, or a file under the root directory).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest

from uploadref.adapters.storage.local import LocalStorage
from uploadref.adapters.storage.memory import MemoryStorage
from uploadref.interfaces.storage import Storage


@dataclass(frozen=True)
class StorageBackend:
    """A storage under test plus a way to create objects in it."""

    storage: Storage
    seed: Callable[[str], None]


def _seed_local(root: Path) -> Callable[[str], None]:
    def seed(path: str) -> None:
        target = root.joinpath(*path.split("/"))
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"upload")

    return seed


@pytest.fixture(params=["memory", "local"])
def backend(request: pytest.FixtureRequest, tmp_path: Path) -> StorageBackend:
    """Return a fresh storage backend for the requested kind."""
    match request.param:
        case "memory":
            memory = MemoryStorage()
            return StorageBackend(storage=memory, seed=memory.put)
        case "local":
            root = tmp_path / "storage"
            return StorageBackend(storage=LocalStorage(root), seed=_seed_local(root))
        case _:
            raise ValueError(f"unknown storage type: {request.param}")
