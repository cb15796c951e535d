"""
Helpers for building relative endpoint paths and search query strings.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Optional, Tuple
from urllib.parse import quote

__all__ = [
    "append_parameter",
    "build_query",
    "escape_segment",
]


def escape_segment(value: str) -> str:
    """Escape an identifier for use as a single path segment."""
    return quote(str(value), safe="")


def _format_value(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return format(value, "f")
    text = str(value)
    return text or None


def append_parameter(url: str, key: str, value: Any) -> str:
    """
    Append ``key=value`` to ``url`` when ``value`` is set.

    ``None`` and empty strings are skipped so callers can pass every optional
    filter unconditionally.
    """
    formatted = _format_value(value)
    if formatted is None:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{key}={quote(formatted, safe='')}"


def build_query(path: str, parameters: Iterable[Tuple[str, Any]]) -> str:
    url = path
    for key, value in parameters:
        url = append_parameter(url, key, value)
    return url
