"""Storage existence interface.

The validator only needs to know whether an object is present at a given
path. Paths are relative and ``/``-separated, e.g. ``"tmp/<uuid>"``; how a
path maps onto a bucket, directory or key space is up to the adapter.

Adapters should raise `StorageError` (or let an `OSError` surface) when
the backend cannot answer. Callers decide how to treat such failures; the
validator treats them as "absent".
"""

import abc

# pylint: disable=too-few-public-methods


class StorageError(Exception):
    """Base class for all storage errors."""


class InvalidPathError(StorageError):
    """The path is absolute, escapes the storage root, or is otherwise unusable."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Invalid storage path {path!r}: {detail}")
        self.path = path
        self.detail = detail


class Storage(abc.ABC):
    """Narrow storage capability: existence checks only."""

    @abc.abstractmethod
    def exists(self, path: str) -> bool:
        """Check if an object exists at ``path``.

        Args:
            path (str): Relative, ``/``-separated object path.

        Returns:
            bool: True if the object exists, False otherwise.

        Raises:
            InvalidPathError: If ``path`` is not an acceptable relative path.
            StorageError: If the backend cannot answer.
        """
