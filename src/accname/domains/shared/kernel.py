"""Shared Kernel - Core types shared across bounded contexts.

These types are intentionally minimal and shared between:
- Element Context (produces ElementView adapters)
- Style Context (reads elements, reports visibility and generated content)
- Role Context (classifies elements)
- Naming Context (computes names and descriptions)
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

_WHITESPACE_RE = re.compile(r"\s+")


class AccNameError(Exception):
    """Base class for all errors raised by the accname package."""


class InvalidElementError(AccNameError, TypeError):
    """Raised when a value handed to the public API is not element-like.

    An element-like value is a BeautifulSoup ``Tag``, an existing
    ``ElementView``, or a mapping carrying a string ``tagName``.
    """


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace (including newlines) and trim the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def split_tokens(value: Optional[str]) -> List[str]:
    """Split a whitespace separated token list (``role``, ID refs)."""
    if not value:
        return []
    return value.split()


def first_non_empty(values: Iterable[Optional[str]]) -> str:
    """Return the first value that is non-empty after trimming, else ``""``."""
    for value in values:
        if value and value.strip():
            return value.strip()
    return ""
