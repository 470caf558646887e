"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only ``log-demo`` command that emits log records at every
level, fixtures to register it on the ``uploadref`` group and to obtain a
CliRunner, and an isolated filesystem per test. The flight recorder is
pointed into the test's temporary directory so runs never touch the real
user log directory.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from uploadref.entrypoints.cli.main import uploadref

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages on a project and a third-party logger."""
    logger = logging.getLogger("uploadref.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any Cloup sections holding it."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture(autouse=True)
def isolated_log_path(tmp_path, monkeypatch):
    """Send the default flight-recorder output to the test's tmp dir."""
    path = tmp_path / "logs" / "latest.log"
    monkeypatch.setenv("UPLOADREF_LOG_PATH", str(path))
    for name in (
        "UPLOADREF_STORAGE_ROOT",
        "UPLOADREF_TMP_PREFIX",
        "UPLOADREF_LOGGER_LEVEL",
        "UPLOADREF_REDACTOR_MODE",
    ):
        monkeypatch.delenv(name, raising=False)
    return path


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    uploadref.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(uploadref, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside runner.isolated_filesystem()."""
    with runner.isolated_filesystem():
        yield
