"""Minimal CSS reader for ``<style>`` blocks and ``style=""`` attributes.

Only what name computation needs is understood: rule sets, declarations
with ``!important``, the ``::before``/``::after``/``::marker``
pseudo-elements and ``content`` values made of strings and ``attr()``.
At-rule blocks (``@media``, ``@supports``, ...) are skipped.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, Iterator, List, Optional, Tuple

from .value_objects import Declaration, PseudoElement, Specificity

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_IMPORTANT_RE = re.compile(r"!\s*important\s*$", re.IGNORECASE)
_PSEUDO_ELEMENT_RE = re.compile(r"::?(before|after|marker)\s*$", re.IGNORECASE)

_ATTRIBUTE_SELECTOR_RE = re.compile(r"\[[^\]]*\]")
_ID_SELECTOR_RE = re.compile(r"#[\w-]+")
_CLASS_SELECTOR_RE = re.compile(r"\.[\w-]+")
_PSEUDO_CLASS_RE = re.compile(r":[\w-]+")
_TYPE_SELECTOR_RE = re.compile(r"(?<![\w-])[a-zA-Z][\w-]*")

_CONTENT_TOKEN_RE = re.compile(
    r'"((?:[^"\\]|\\.)*)"'
    r"|'((?:[^'\\]|\\.)*)'"
    r"|attr\(\s*([\w-]+)\s*\)",
    re.IGNORECASE | re.DOTALL,
)
_HEX_ESCAPE_RE = re.compile(r"\\([0-9a-fA-F]{1,6})\s?")
_CHAR_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def strip_comments(text: str) -> str:
    return _COMMENT_RE.sub("", text)


def split_top_level(text: str, separator: str) -> List[str]:
    """Split on ``separator`` outside of quotes, parentheses and brackets."""
    parts: List[str] = []
    depth = 0
    quote: Optional[str] = None
    start = 0
    index = 0
    while index < len(text):
        char = text[index]
        if quote:
            if char == "\\":
                index += 2
                continue
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char in "([":
            depth += 1
        elif char in ")]":
            depth = max(depth - 1, 0)
        elif char == separator and depth == 0:
            parts.append(text[start:index])
            start = index + 1
        index += 1
    parts.append(text[start:])
    return [part.strip() for part in parts if part.strip()]


def _find_block_end(text: str, open_index: int) -> int:
    depth = 0
    quote: Optional[str] = None
    for index in range(open_index, len(text)):
        char = text[index]
        if quote:
            if char == quote:
                quote = None
            continue
        if char in "\"'":
            quote = char
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return len(text)


def iter_rule_blocks(text: str) -> Iterator[Tuple[str, str]]:
    """Yield ``(prelude, body)`` for every top-level rule set."""
    position = 0
    while position < len(text):
        open_index = text.find("{", position)
        if open_index == -1:
            return
        prelude = text[position:open_index]
        # Statement at-rules (@import ...;) end before the next rule set
        if ";" in prelude:
            prelude = prelude[prelude.rfind(";") + 1:]
        prelude = prelude.strip()
        end = _find_block_end(text, open_index)
        if prelude.startswith("@"):
            logger.debug("Skipping at-rule block %s", prelude.split()[0])
        elif prelude:
            yield prelude, text[open_index + 1:end]
        position = end + 1


def parse_declarations(body: str) -> Tuple[Declaration, ...]:
    """Parse ``prop: value; ...`` into Declarations, in source order."""
    declarations: List[Declaration] = []
    for chunk in split_top_level(strip_comments(body), ";"):
        prop, sep, value = chunk.partition(":")
        if not sep:
            continue
        prop = prop.strip().lower()
        value = value.strip()
        important = False
        match = _IMPORTANT_RE.search(value)
        if match:
            important = True
            value = value[:match.start()].rstrip()
        if prop and value:
            declarations.append(Declaration(prop, value, important))
    return tuple(declarations)


def split_pseudo_element(selector: str) -> Tuple[str, Optional[PseudoElement]]:
    """Separate a trailing ``::before``/``::after``/``::marker``."""
    match = _PSEUDO_ELEMENT_RE.search(selector)
    if not match:
        return selector.strip(), None
    base = selector[:match.start()].strip()
    if not base or base[-1] in " >+~":
        base = f"{base}*".strip()
    return base, PseudoElement.parse(match.group(0).strip())


def selector_specificity(selector: str) -> Specificity:
    """Approximate (ids, classes/attributes/pseudo-classes, types)."""
    rest, attributes = _ATTRIBUTE_SELECTOR_RE.subn(" ", selector)
    rest, ids = _ID_SELECTOR_RE.subn(" ", rest)
    rest, classes = _CLASS_SELECTOR_RE.subn(" ", rest)
    rest = _PSEUDO_ELEMENT_RE.sub(" ", rest)
    rest, pseudo_classes = _PSEUDO_CLASS_RE.subn(" ", rest)
    types = len(_TYPE_SELECTOR_RE.findall(rest))
    return ids, classes + attributes + pseudo_classes, types


def _unescape(value: str) -> str:
    value = _HEX_ESCAPE_RE.sub(lambda m: chr(int(m.group(1), 16)), value)
    return _CHAR_ESCAPE_RE.sub(r"\1", value)


def resolve_content(
    value: str, attribute: Callable[[str], Optional[str]]
) -> Optional[str]:
    """Resolve a ``content`` value to text.

    Quoted strings and ``attr(name)`` are concatenated; counters, images
    and quote keywords contribute nothing. ``none``/``normal`` mean no
    generated box at all.
    """
    if value.strip().lower() in ("", "none", "normal"):
        return None
    parts: List[str] = []
    for match in _CONTENT_TOKEN_RE.finditer(value):
        double, single, attribute_name = match.groups()
        if attribute_name is not None:
            parts.append(attribute(attribute_name.lower()) or "")
        else:
            parts.append(_unescape(double if double is not None else single))
    text = "".join(parts)
    return text or None
