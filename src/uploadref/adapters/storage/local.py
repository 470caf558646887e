"""Local filesystem-based storage adapter."""

from pathlib import Path, PurePosixPath

from uploadref.interfaces.storage import InvalidPathError, Storage

PathLike = str | Path


class LocalStorage(Storage):
    """Storage implementation that maps object paths onto a directory tree.

    ``exists("tmp/<uuid>")`` is true when ``<root>/tmp/<uuid>`` is a regular
    file. The root is never created; under a missing root every object is
    absent.
    """

    def __init__(self, root: PathLike) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        """Directory under which object paths are resolved."""
        return self._root

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    # --- Internal Helpers ---

    def _resolve(self, path: str) -> Path:
        """Map a relative object path to a filesystem path under the root."""
        self._validate_path(path)
        return self._root.joinpath(*PurePosixPath(path).parts)

    @staticmethod
    def _validate_path(path: str) -> None:
        """Raise InvalidPathError if ``path`` could escape the root.

        Enforced:
        - Non-empty
        - No backslashes or NUL bytes
        - Relative (no leading slash)
        - No ``..`` segments
        """
        if not path:
            raise InvalidPathError(path, "empty path")

        if "\\" in path or "\x00" in path:
            raise InvalidPathError(path, "contains a backslash or NUL byte")

        pure = PurePosixPath(path)
        if pure.is_absolute():
            raise InvalidPathError(path, "absolute paths are not allowed")

        if ".." in pure.parts:
            raise InvalidPathError(path, "parent directory segments are not allowed")
