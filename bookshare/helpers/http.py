"""HTTP header and content-type utilities."""

from __future__ import annotations

from collections.abc import Mapping
import re

_HTML_RE = re.compile(r"^\s*<[^?]")


def get_header(headers: Mapping[str, str] | None, name: str) -> str | None:
    """Get a header value by name (case-insensitive, first match wins)."""
    if not headers:
        return None
    name_lower = name.lower()
    for key, value in headers.items():
        if key.lower() == name_lower:
            return value
    return None


def looks_like_html(body: str) -> bool:
    """True if *body* opens with a markup tag other than an XML declaration."""
    return bool(_HTML_RE.match(body))


def media_type(headers: Mapping[str, str] | None) -> str:
    """The bare media type of the Content-Type header, lower-cased."""
    value = get_header(headers, "content-type") or ""
    return value.split(";", 1)[0].strip().lower()
