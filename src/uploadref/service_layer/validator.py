"""Validation of upload-reference form fields.

`FileValidator` decides whether a form-field value refers to an acceptable
file:

1. An absolute URL (scheme + host) passes immediately. Remote resources are
   outside our control, so no storage query is made.
2. Anything else is treated as an upload file name and must contain a
   canonical UUID (see `uploadref.domain.name_parser`).
3. The temporary object ``<tmp_prefix>/<uuid>`` must exist in storage. Exactly
   one existence query is issued per call.

`passes` reports a plain boolean and never raises; `check` returns the same
decision as a `ValidationOutcome` carrying a `FailureReason`. Storage errors
of any kind fail closed.
"""

from __future__ import annotations

import logging

from uploadref.config import DEFAULT_TMP_PREFIX
from uploadref.domain.errors import MalformedNameError
from uploadref.domain.name_parser import NameParser
from uploadref.domain.urls import recognize_url
from uploadref.domain.value_objects import FailureReason, UrlCheck, ValidationOutcome
from uploadref.interfaces.redactor import Redactor
from uploadref.interfaces.storage import Storage

__all__ = ["FileValidator"]

logger = logging.getLogger(__name__)


class FileValidator:
    """Pass/fail validator for upload-reference values.

    Args:
        storage: Existence capability used to look up temporary objects.
        parser: File-name parser; defaults to a `NameParser` with the default
            sanitation policy.
        tmp_prefix: Storage prefix under which temporary objects live.
        redactor: Used to scrub URL values before they are logged. Without
            one, accepted URLs are logged without their value.

    Instances keep no per-call state and may be shared across threads.
    """

    def __init__(
        self,
        storage: Storage,
        *,
        parser: NameParser | None = None,
        tmp_prefix: str = DEFAULT_TMP_PREFIX,
        redactor: Redactor | None = None,
    ) -> None:
        prefix = tmp_prefix.strip("/")
        if not prefix:
            raise ValueError("tmp_prefix must not be empty")
        self._storage = storage
        self._parser = parser or NameParser()
        self._tmp_prefix = prefix
        self._redactor = redactor

    @property
    def tmp_prefix(self) -> str:
        """Prefix under which temporary objects are looked up."""
        return self._tmp_prefix

    @property
    def redactor(self) -> Redactor | None:
        """Redactor applied to URL values before they are logged, if any."""
        return self._redactor

    def temporary_path(self, unique_id: str) -> str:
        """Return the storage path of the temporary object keyed by ``unique_id``."""
        return f"{self._tmp_prefix}/{unique_id}"

    def passes(self, field_name: str, value: object) -> bool:
        """Return ``True`` if ``value`` is an acceptable file reference.

        Never raises; every failure is reported as ``False``.
        """
        return self.check(field_name, value).passed

    def check(self, field_name: str, value: object) -> ValidationOutcome:
        """Validate ``value`` and report why it failed, if it did.

        Args:
            field_name: Name of the form field (used for diagnostics only).
            value: The submitted field value.

        Returns:
            ValidationOutcome: ``passed`` plus a `FailureReason` on failure.
        """
        if recognize_url(value) is UrlCheck.IS_URL:
            shown = (
                self._redactor.sanitize_url(str(value))
                if self._redactor is not None
                else "<url>"
            )
            logger.debug(
                "Field %r: URL reference %s accepted without storage lookup",
                field_name,
                shown,
            )
            return ValidationOutcome.ok()

        try:
            parsed = self._parser.parse(value)  # type: ignore[arg-type]
        except MalformedNameError:
            logger.debug("Field %r: %r has no canonical UUID", field_name, value)
            return ValidationOutcome.failed(FailureReason.MALFORMED_NAME)

        path = self.temporary_path(parsed.unique_id)
        try:
            found = bool(self._storage.exists(path))
        except Exception:  # pylint: disable=broad-exception-caught
            logger.warning(
                "Field %r: existence check for %s failed; treating as absent",
                field_name,
                path,
                exc_info=True,
            )
            return ValidationOutcome.failed(FailureReason.STORAGE_ERROR)

        if not found:
            logger.debug("Field %r: temporary object %s not found", field_name, path)
            return ValidationOutcome.failed(FailureReason.NOT_FOUND)

        logger.debug("Field %r: temporary object %s found", field_name, path)
        return ValidationOutcome.ok()
