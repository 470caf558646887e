"""Upload file-name parsing.

An upload reference is a file name of the form::

    <display name>_<uuid>.<extension>

where ``<uuid>`` is the canonical 8-4-4-4-12 hexadecimal UUID text that keys
the temporary object in storage. This module locates the UUID, splits the
name around it and reduces the human-readable parts to the storage-safe
alphabet (ASCII letters, digits, ``-`` and ``_``).

Rules
-----
- **First match wins**: when several UUID-shaped segments are present, the
  one with the earliest start position is the identifier. Anything after it
  belongs to the trailing text.
- **Separator**: exactly one ``_`` immediately preceding the UUID is the
  separator and is not part of the display name.
- **Extension**: the text after the final ``.`` following the UUID,
  sanitized and then lowercased, placeholders included. No ``.`` means no
  extension.
- **Sanitation**: each character outside the storage-safe alphabet is
  replaced by the parser's placeholder. The default placeholder is the empty
  string, so non-Latin scripts are dropped rather than mis-encoded. With
  ``placeholder="_"`` the character count is preserved. Sanitation is
  idempotent for either choice.

Typical usage
-------------
    parsed = parse("report_85e16d7b-58ed-43bc-8dce-7d3ff7d69f41.PDF")
    parsed.display_name       # "report"
    parsed.extension          # "pdf"
    parsed.moved_file_name()  # "report_85e16d7b-58ed-43bc-8dce-7d3ff7d69f41.pdf"
"""

from __future__ import annotations

import string

from uploadref.domain.errors import MalformedNameError
from uploadref.domain.value_objects import SEPARATOR, UUID_PATTERN, ParsedFileName

__all__ = [
    "DEFAULT_PLACEHOLDER",
    "NameParser",
    "STORAGE_SAFE_CHARACTERS",
    "find_unique_id",
    "parse",
    "sanitize",
]

STORAGE_SAFE_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-_")
DEFAULT_PLACEHOLDER = ""


def sanitize(text: str, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Replace every character outside the storage-safe alphabet.

    Works on characters (code points), never on encoded bytes, so a
    multi-byte character yields exactly one ``placeholder``.

    Args:
        text: The text to sanitize.
        placeholder: Replacement for each disallowed character. Must be empty
            or a single storage-safe character.

    Returns:
        str: ``text`` with disallowed characters replaced.
    """
    return "".join(ch if ch in STORAGE_SAFE_CHARACTERS else placeholder for ch in text)


def find_unique_id(raw_name: str) -> str | None:
    """Return the earliest UUID-shaped segment of ``raw_name``, lowercased.

    Returns:
        str | None: The canonical UUID text, or ``None`` if there is none.
    """
    match = UUID_PATTERN.search(raw_name)
    return match.group(0).lower() if match else None


class NameParser:
    """Decompose upload file names into a `ParsedFileName`.

    Instances hold no per-call state and can be shared across threads.
    """

    def __init__(self, placeholder: str = DEFAULT_PLACEHOLDER) -> None:
        if len(placeholder) > 1 or not set(placeholder) <= STORAGE_SAFE_CHARACTERS:
            raise ValueError(
                f"Placeholder must be empty or one storage-safe character, got {placeholder!r}"  # pylint: disable=line-too-long
            )
        self._placeholder = placeholder

    @property
    def placeholder(self) -> str:
        """Replacement used for characters outside the storage-safe alphabet."""
        return self._placeholder

    def parse(self, raw_name: str) -> ParsedFileName:
        """Parse ``raw_name`` into display name, unique id and extension.

        Args:
            raw_name: Candidate upload file name.

        Returns:
            ParsedFileName: The decomposed, sanitized name.

        Raises:
            MalformedNameError: If ``raw_name`` is not a string or contains no
                canonical UUID segment.
        """
        if not isinstance(raw_name, str):
            raise MalformedNameError(raw_name)

        match = UUID_PATTERN.search(raw_name)
        if match is None:
            raise MalformedNameError(raw_name)

        display_candidate = raw_name[: match.start()]
        if display_candidate.endswith(SEPARATOR):
            display_candidate = display_candidate[: -len(SEPARATOR)]

        trailing = raw_name[match.end() :]
        extension = trailing.rpartition(".")[2] if "." in trailing else ""

        return ParsedFileName(
            display_name=sanitize(display_candidate, self._placeholder),
            unique_id=match.group(0).lower(),
            extension=sanitize(extension, self._placeholder).lower(),
        )

    def sanitize(self, text: str) -> str:
        """Sanitize ``text`` with this parser's placeholder."""
        return sanitize(text, self._placeholder)


_default_parser = NameParser()


def parse(raw_name: str) -> ParsedFileName:
    """Parse ``raw_name`` with the default (dropping) sanitation policy.

    See `NameParser.parse`.
    """
    return _default_parser.parse(raw_name)
