"""Recognition of absolute URLs in form-field values."""

from urllib.parse import urlsplit

from uploadref.domain.value_objects import UrlCheck

__all__ = ["is_url", "recognize_url"]


def recognize_url(value: object) -> UrlCheck:
    """Classify ``value`` as an absolute URL or not.

    A value is an absolute URL when it is a string that parses with both a
    scheme and a host, e.g. ``https://example.com/file.pdf``. Values with
    surrounding or embedded whitespace, bare paths (``/tmp/x``), Windows drive
    paths (``C:/x``) and strings that fail to parse are ``NOT_URL``.

    Args:
        value: The raw form-field value.

    Returns:
        UrlCheck: ``IS_URL`` or ``NOT_URL``.
    """
    if not isinstance(value, str) or not value or any(ch.isspace() for ch in value):
        return UrlCheck.NOT_URL

    try:
        parts = urlsplit(value)
        host = parts.hostname
    except ValueError:
        # e.g. unbalanced IPv6 brackets
        return UrlCheck.NOT_URL

    if parts.scheme and host:
        return UrlCheck.IS_URL
    return UrlCheck.NOT_URL


def is_url(value: object) -> bool:
    """Return ``True`` if `recognize_url` reports ``IS_URL``."""
    return recognize_url(value) is UrlCheck.IS_URL
