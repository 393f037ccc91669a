"""Syntactic URL checks for DEP-12 URL fields."""
from __future__ import annotations

import re
from typing import Any, Protocol
from urllib.parse import urlsplit

# RFC 3986 unreserved, reserved and percent characters.
_ALLOWED = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*")
_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+\-.]*")


class UrlChecker(Protocol):
    def __call__(self, value: Any) -> bool:  # pragma: no cover - interface
        ...


def is_valid_url(value: Any) -> bool:
    """Return True when ``value`` is a syntactically valid absolute URI.

    Only the generic RFC 3986 syntax is checked, nothing is fetched.
    """
    if not isinstance(value, str) or not value:
        return False
    if not _ALLOWED.fullmatch(value) or _BAD_PERCENT.search(value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    if not parts.scheme or not _SCHEME.fullmatch(parts.scheme):
        return False
    rest = value[len(parts.scheme) + 1 :]
    if rest.startswith("//"):
        return parts.path == "" or parts.path.startswith("/")
    return not parts.path.startswith("//")
