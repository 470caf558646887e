"""Module including value objects used across the domain layer."""

import re
from dataclasses import dataclass
from enum import Enum

UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)
CANONICAL_UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
)
STORAGE_SAFE_PATTERN = re.compile(r"[A-Za-z0-9_-]*")
EXTENSION_PATTERN = re.compile(r"[a-z0-9_-]*")
SEPARATOR = "_"


class UrlCheck(Enum):
    """Outcome of recognizing a value as an absolute URL."""

    IS_URL = "is_url"
    NOT_URL = "not_url"


class FailureReason(Enum):
    """Why a validation attempt failed.

    Diagnostic only: every reason maps to the same boolean ``False``.
    """

    MALFORMED_NAME = "malformed_name"
    NOT_FOUND = "not_found"
    STORAGE_ERROR = "storage_error"


@dataclass(frozen=True)
class ParsedFileName:
    """Value object representing a decomposed upload file name.

    Attributes:
        display_name: Sanitized, human-readable prefix; may be empty.
        unique_id: Canonical lowercase UUID text (8-4-4-4-12).
        extension: Lowercase suffix without the leading dot; may be empty.

    Raises:
        ValueError: If ``unique_id`` is not canonical or a name part contains
            characters outside the storage-safe alphabet.
    """

    display_name: str
    unique_id: str
    extension: str = ""

    def __post_init__(self) -> None:
        if not CANONICAL_UUID_PATTERN.fullmatch(self.unique_id):
            raise ValueError(f"Not a canonical UUID: {self.unique_id!r}")
        if not STORAGE_SAFE_PATTERN.fullmatch(self.display_name):
            raise ValueError(f"Display name is not storage-safe: {self.display_name!r}")
        if not EXTENSION_PATTERN.fullmatch(self.extension):
            raise ValueError(f"Extension is not storage-safe: {self.extension!r}")

    @property
    def file_name(self) -> str:
        """Alias for ``display_name``."""
        return self.display_name

    def moved_file_name(self) -> str:
        """Return the name the file takes once moved out of temporary storage.

        Format: ``<display_name>_<unique_id>.<extension>``; the ``.<extension>``
        part is omitted when there is no extension.
        """
        name = f"{self.display_name}{SEPARATOR}{self.unique_id}"
        if self.extension:
            name = f"{name}.{self.extension}"
        return name


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of a single validation attempt."""

    passed: bool
    reason: FailureReason | None = None

    @classmethod
    def ok(cls) -> "ValidationOutcome":
        """Return a passing outcome."""
        return cls(passed=True)

    @classmethod
    def failed(cls, reason: FailureReason) -> "ValidationOutcome":
        """Return a failing outcome tagged with ``reason``."""
        return cls(passed=False, reason=reason)

    def __bool__(self) -> bool:
        return self.passed
