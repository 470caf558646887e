"""Interfaces for redacting sensitive values.

This module defines the Redactor interface and the RedactorMode enumeration
used by adapters to mask secrets (passwords, tokens, pre-signed URL
signatures, etc.) in URLs before they are written to logs or shown in CLI
output. Implementations provide `sanitize_url`, returning a display-safe
string with sensitive values redacted.
"""

import abc
from enum import Enum

# pylint: disable=too-few-public-methods


class RedactorMode(Enum):
    """Enumeration for redactor modes.

    Modes:
    - LENIENT: redact passwords/tokens/signatures but keep usernames/ids visible.
    - STRICT: additionally redact usernames, access key ids and credentials.
    """

    LENIENT = "lenient"
    STRICT = "strict"


class Redactor(abc.ABC):
    """Interface for sanitizing sensitive information from URLs."""

    _mode: RedactorMode

    @abc.abstractmethod
    def sanitize_url(self, raw_url: str) -> str:
        """Return a display-safe URL.

        Args:
            raw_url: Raw URL, possibly carrying credentials or a signature.

        Returns:
            The URL with sensitive information redacted.
        """

    @property
    def mode(self) -> RedactorMode:
        """Return the redaction mode."""
        return self._mode
