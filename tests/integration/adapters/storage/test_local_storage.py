"""Integration tests for the LocalStorage adapter.

LocalStorage also runs the contract tests in
`tests/contract/storage/test_storage_contract.py`; these are additional
tests specific to the filesystem mapping.
"""

import pytest

from uploadref.adapters.storage.local import LocalStorage
from uploadref.interfaces.storage import InvalidPathError

UUID = "85e16d7b-58ed-43bc-8dce-7d3ff7d69f41"


def test_missing_root_is_left_alone(tmp_path):
    """Lookups under a missing root report absence and create nothing."""
    root = tmp_path / "does" / "not" / "exist"
    storage = LocalStorage(root)
    assert storage.root == root
    assert storage.exists(f"tmp/{UUID}") is False
    assert not (tmp_path / "does").exists()


def test_accepts_string_root(tmp_path):
    """A plain string root is accepted."""
    storage = LocalStorage(str(tmp_path))
    assert storage.root == tmp_path


def test_existing_file_is_found(tmp_path):
    """A regular file at <root>/tmp/<uuid> exists."""
    (tmp_path / "tmp").mkdir()
    (tmp_path / "tmp" / UUID).write_bytes(b"data")
    assert LocalStorage(tmp_path).exists(f"tmp/{UUID}")


def test_directory_is_not_an_object(tmp_path):
    """A directory at the object path does not count."""
    (tmp_path / "tmp" / UUID).mkdir(parents=True)
    assert not LocalStorage(tmp_path).exists(f"tmp/{UUID}")


def test_empty_file_exists(tmp_path):
    """Zero-byte uploads still exist."""
    (tmp_path / "tmp").mkdir()
    (tmp_path / "tmp" / UUID).touch()
    assert LocalStorage(tmp_path).exists(f"tmp/{UUID}")


@pytest.mark.parametrize(
    "path",
    [
        f"/tmp/{UUID}",
        f"../tmp/{UUID}",
        f"tmp/../../{UUID}",
        f"tmp\\{UUID}",
        f"tmp/{UUID}\x00",
        "",
    ],
    ids=["absolute", "parent", "nested-parent", "backslash", "nul", "empty"],
)
def test_unsafe_paths_rejected(tmp_path, path):
    """Paths that could escape the root raise InvalidPathError."""
    with pytest.raises(InvalidPathError) as exc_info:
        LocalStorage(tmp_path / "root").exists(path)
    assert exc_info.value.path == path


def test_file_outside_root_is_not_reachable(tmp_path):
    """A file next to the root cannot be reached through '..'."""
    root = tmp_path / "root"
    (tmp_path / UUID).write_bytes(b"secret")
    storage = LocalStorage(root)
    with pytest.raises(InvalidPathError):
        storage.exists(f"../{UUID}")
