"""Global pytest fixtures for uploadref."""

from __future__ import annotations

from pathlib import Path

import pytest

from uploadref.adapters.storage.memory import MemoryStorage

TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKERS = {
    "unit": "unit",
    "contract": "contract",
    "integration": "integration",
    "e2e": "e2e",
}

SAMPLE_UUID = "85e16d7b-58ed-43bc-8dce-7d3ff7d69f41"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark each test after the top-level directory it lives in."""
    for item in items:
        try:
            relative = item.path.resolve().relative_to(TESTS_ROOT)
        except ValueError:
            continue
        marker = DIRECTORY_MARKERS.get(relative.parts[0])
        if marker and not any(m.name == marker for m in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker))


@pytest.fixture
def sample_uuid() -> str:
    """A fixed canonical UUID used across tests."""
    return SAMPLE_UUID


@pytest.fixture
def memory_storage() -> MemoryStorage:
    """Fresh, empty in-memory storage."""
    return MemoryStorage()
