"""Wire the validator to a storage backend."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from uploadref import config
from uploadref.adapters.redactor import Redactor
from uploadref.adapters.storage.local import LocalStorage
from uploadref.interfaces.redactor import RedactorMode
from uploadref.interfaces.storage import Storage
from uploadref.service_layer.validator import FileValidator


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring."""

    storage: Storage
    validator: FileValidator


def build_validator(
    storage: Storage,
    tmp_prefix: str | None = None,
    redactor_mode: RedactorMode = RedactorMode.LENIENT,
) -> FileValidator:
    """Build a validator over ``storage`` with the configured temporary prefix."""
    return FileValidator(
        storage,
        tmp_prefix=tmp_prefix or config.get_tmp_prefix(),
        redactor=Redactor(redactor_mode),
    )


def bootstrap(
    storage_root: Path | None = None,
    tmp_prefix: str | None = None,
    redactor_mode: RedactorMode = RedactorMode.LENIENT,
) -> AppContainer:
    """Build a local-filesystem storage and a validator on top of it.

    Args:
        storage_root: Root directory of the storage; falls back to
            `UPLOADREF_STORAGE_ROOT`.
        tmp_prefix: Temporary-object prefix; falls back to `UPLOADREF_TMP_PREFIX`.
        redactor_mode: Redaction mode for logged URLs.

    Raises:
        config.StorageRootNotSetError: If no root is given or configured.
    """
    storage = LocalStorage(storage_root or config.get_storage_root())
    return AppContainer(
        storage=storage,
        validator=build_validator(storage, tmp_prefix, redactor_mode),
    )
