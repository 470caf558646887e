"""Unit tests for uploadref.logging helpers."""

import logging
from logging.handlers import MemoryHandler

import pytest
from rich.logging import RichHandler

from uploadref.logging import (
    ThirdPartyPrefixFilter,
    config_console_handler,
    config_flight_recorder,
    effective_level,
)


def _record(name: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "prefix"),
    [
        ("uploadref.service_layer.validator", ""),
        ("uploadref", ""),
        ("urllib3.connectionpool", "[urllib3]"),
        ("click_extra", "[click_extra]"),
    ],
)
def test_third_party_prefix(name, prefix):
    """Only records from other libraries get a bracketed prefix."""
    record = _record(name)
    assert ThirdPartyPrefixFilter().filter(record) is True
    assert record.prefix == prefix  # type: ignore[attr-defined]


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (5, 0, logging.DEBUG),
        (0, 1, logging.ERROR),
        (0, 2, logging.CRITICAL),
        (0, 9, logging.CRITICAL),
        (1, 1, logging.WARNING),
    ],
)
def test_effective_level(verbose, quiet, expected):
    """-v/-q shift from WARNING and clamp to DEBUG..CRITICAL."""
    assert effective_level(verbose, quiet) == expected


def test_console_handler_levels():
    """Debug mode forces DEBUG and drops the prefix filter."""
    normal = config_console_handler(level=logging.WARNING)
    debug = config_console_handler(level=logging.WARNING, debug_mode=True)
    assert isinstance(normal, RichHandler)
    assert normal.level == logging.WARNING
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in normal.filters)
    assert debug.level == logging.DEBUG
    assert not debug.filters


def test_flight_recorder_creates_parent_dirs(tmp_path):
    """The flight recorder creates missing parent directories of its file."""
    path = tmp_path / "logs" / "nested" / "latest.log"
    handler = config_flight_recorder(path, capacity=10, flush_on_close=True)
    target = handler.target
    try:
        assert isinstance(handler, MemoryHandler)
        assert path.parent.is_dir()
        handler.handle(_record("uploadref.test"))
    finally:
        handler.close()
        target.close()  # type: ignore[union-attr]
    assert "msg" in path.read_text(encoding="utf-8")
