"""Configuration utilities for uploadref.

This module centralizes small helpers and constants related to application
configuration. Settings are read from the environment.
"""

import os
from pathlib import Path

STORAGE_ROOT_ENV = "UPLOADREF_STORAGE_ROOT"  # pragma: no mutate
TMP_PREFIX_ENV = "UPLOADREF_TMP_PREFIX"  # pragma: no mutate
DEFAULT_TMP_PREFIX = "tmp"


class StorageRootNotSetError(Exception):
    """Raised when the UPLOADREF_STORAGE_ROOT environment variable is not set."""


def get_storage_root() -> Path:
    """Get the local storage root from the environment.

    Returns:
        The value of the `UPLOADREF_STORAGE_ROOT` environment variable as a path.

    Raises:
        StorageRootNotSetError: If `UPLOADREF_STORAGE_ROOT` is not set.
    """
    if not (root := os.environ.get(STORAGE_ROOT_ENV)):
        raise StorageRootNotSetError
    return Path(root).expanduser()


def get_tmp_prefix() -> str:
    """Get the temporary-object prefix, without surrounding slashes.

    Falls back to ``"tmp"`` when `UPLOADREF_TMP_PREFIX` is unset or blank.
    """
    prefix = os.environ.get(TMP_PREFIX_ENV, "").strip().strip("/")
    return prefix or DEFAULT_TMP_PREFIX
