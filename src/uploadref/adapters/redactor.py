"""Regex-based redactor for scrubbing secrets from URLs.

Upload values that are URLs are often pre-signed object-store links whose
query strings grant access on their own. This module provides a Redactor
implementation that masks those secrets (signatures, tokens, passwords in
the userinfo part) before a value is logged. It supports lenient and strict
modes; strict also redacts usernames and access-key ids.
"""

import re

from uploadref.interfaces import redactor
from uploadref.interfaces.redactor import RedactorMode

# pylint: disable=too-few-public-methods

PLACEHOLDER = "***"
SECRET_KEYWORDS = [
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "api_key",
    "apikey",
    "access_token",
    "sig",
    "signature",
    "x_amz_signature",
    "x_amz_security_token",
    "x_goog_signature",
]
STRICT_MODE_ADDITIONAL_KEYWORDS = [
    "user",
    "username",
    "x_amz_credential",
    "x_goog_credential",
    "awsaccesskeyid",
    "googleaccessid",
]
STRICT_MODE_SECRET_KEYWORDS = SECRET_KEYWORDS + STRICT_MODE_ADDITIONAL_KEYWORDS


def _keyword_pattern(keywords: list[str]) -> re.Pattern[str]:
    alternatives = "|".join(kw.replace("_", "[-_]?") for kw in keywords)
    return re.compile(rf"([?&;](?:{alternatives})=)[^&#\s;]*", re.IGNORECASE)


QUERY_STRING_PATTERN = _keyword_pattern(SECRET_KEYWORDS)
STRICT_MODE_QUERY_STRING_PATTERN = _keyword_pattern(STRICT_MODE_SECRET_KEYWORDS)
URL_PASSWORD_PATTERN = re.compile(r"(?<=://)([^:@/]+):([^@/]+)@")
URL_USER_PATTERN = re.compile(r"(?<=://)([^:@/]+)(?=(?::[^@/]*)?@)")


class Redactor(redactor.Redactor):
    """Redactor implementation using regex-based sanitization."""

    def __init__(self, mode: RedactorMode = RedactorMode.LENIENT) -> None:
        self._mode = mode

    def sanitize_url(self, raw_url: str) -> str:
        sanitized = str(raw_url)

        # 1) user:pass@  → user:***@
        sanitized = URL_PASSWORD_PATTERN.sub(r"\1:***@", sanitized)  # pragma: no mutate

        # 2) Strict: redact the username before '@'
        if self._mode == RedactorMode.STRICT:
            sanitized = URL_USER_PATTERN.sub(PLACEHOLDER, sanitized)

        # 3) Query-string secrets
        query_pattern = (
            STRICT_MODE_QUERY_STRING_PATTERN
            if self._mode == RedactorMode.STRICT
            else QUERY_STRING_PATTERN
        )
        sanitized = query_pattern.sub(rf"\1{PLACEHOLDER}", sanitized)

        return sanitized
