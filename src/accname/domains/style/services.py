"""Style Domain Services.

The naming algorithm asks three questions about presentation:

- is this element hidden from the accessibility tree by CSS?
- what is its ``display`` (inline children are not space-separated)?
- what text do its ``::before``/``::after``/``::marker`` boxes generate?

CascadeStyleResolver answers them for a parsed document by running a
small cascade over its ``<style>`` elements and ``style`` attributes.
NullStyleResolver answers them for virtual elements, which have no
stylesheet: nothing is hidden and nothing is generated.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Hashable, Optional, Protocol, Tuple

from ..element.value_objects import DocumentView, ElementView
from .aggregates import StyleSheet
from .parser import parse_declarations, resolve_content
from .value_objects import PseudoElement

logger = logging.getLogger(__name__)

# Elements the user-agent stylesheet never renders
UA_HIDDEN_TAGS = frozenset({
    "base", "datalist", "head", "link", "meta", "noscript", "param",
    "script", "style", "template", "title",
})

UA_INLINE_TAGS = frozenset({
    "a", "abbr", "b", "bdi", "bdo", "br", "cite", "code", "data", "del",
    "dfn", "em", "i", "img", "ins", "kbd", "label", "mark", "output", "q",
    "s", "samp", "slot", "small", "span", "strong", "sub", "sup", "svg",
    "time", "u", "var", "wbr",
})

UA_BLOCK_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "body", "center", "dd",
    "details", "dialog", "dir", "div", "dl", "dt", "fieldset",
    "figcaption", "figure", "footer", "form", "h1", "h2", "h3", "h4",
    "h5", "h6", "header", "hgroup", "hr", "html", "legend", "main",
    "menu", "nav", "ol", "optgroup", "option", "p", "pre", "search",
    "section", "summary", "ul",
})

UA_INLINE_BLOCK_TAGS = frozenset({
    "button", "input", "meter", "progress", "select", "textarea",
})

UA_TABLE_DISPLAY = {
    "caption": "table-caption",
    "col": "table-column",
    "colgroup": "table-column-group",
    "table": "table",
    "tbody": "table-row-group",
    "td": "table-cell",
    "tfoot": "table-footer-group",
    "th": "table-cell",
    "thead": "table-header-group",
    "tr": "table-row",
}


def default_display(tag_name: str) -> str:
    """User-agent ``display`` for a tag, ignoring author styles."""
    if tag_name in UA_HIDDEN_TAGS:
        return "none"
    if tag_name in UA_INLINE_TAGS:
        return "inline"
    if tag_name in UA_INLINE_BLOCK_TAGS:
        return "inline-block"
    if tag_name == "li":
        return "list-item"
    if tag_name in UA_BLOCK_TAGS:
        return "block"
    # Unknown and custom elements render inline
    return UA_TABLE_DISPLAY.get(tag_name, "inline")


@lru_cache(maxsize=64)
def parse_style_sheets(sources: Tuple[str, ...]) -> StyleSheet:
    """Parse <style> texts once; documents with the same styles share the result."""
    logger.debug("Parsing %d style sheet(s)", len(sources))
    return StyleSheet.parse(sources)


class StyleResolver(Protocol):
    """Protocol for the presentation queries made by name computation."""

    def is_hidden(self, element: ElementView) -> bool:
        """True when CSS removes the element from the accessibility tree."""
        ...

    def display(self, element: ElementView) -> str:
        """Computed ``display`` keyword of the element."""
        ...

    def pseudo_content(
        self, element: ElementView, pseudo: PseudoElement
    ) -> Optional[str]:
        """Generated text of a pseudo-element, space-padded unless inline."""
        ...


class NullStyleResolver:
    """StyleResolver for elements that have no stylesheet."""

    def is_hidden(self, element: ElementView) -> bool:
        return False

    def display(self, element: ElementView) -> str:
        return default_display(element.tag_name)

    def pseudo_content(
        self, element: ElementView, pseudo: PseudoElement
    ) -> Optional[str]:
        return None


@dataclass
class CascadeStyleResolver:
    """StyleResolver backed by a document's author styles.

    Usage:

        resolver = CascadeStyleResolver.for_document(element.document())
        resolver.is_hidden(element)
        resolver.pseudo_content(label, PseudoElement.BEFORE)  # "fancy "
    """
    stylesheet: StyleSheet
    _visibility: Dict[Hashable, str] = field(default_factory=dict, repr=False)

    @classmethod
    def for_document(cls, document: DocumentView) -> "CascadeStyleResolver":
        return cls(parse_style_sheets(tuple(document.style_sheets())))

    def _computed(
        self,
        element: ElementView,
        prop: str,
        pseudo: Optional[PseudoElement] = None,
    ) -> Optional[str]:
        tag = element.native
        if tag is None:
            return None
        inline = ()
        if pseudo is None:
            inline = parse_declarations(element.attribute("style") or "")
        value = self.stylesheet.cascaded_value(tag, prop, pseudo, inline)
        return value.strip().lower() if value is not None else None

    def display(self, element: ElementView) -> str:
        value = self._computed(element, "display")
        if value and value not in ("inherit", "initial", "unset", "revert"):
            return value.split()[0]
        if element.has_attribute("hidden"):
            return "none"
        if element.tag_name == "input" and (element.attribute("type") or "").lower() == "hidden":
            return "none"
        return default_display(element.tag_name)

    def visibility(self, element: ElementView) -> str:
        """Computed ``visibility``; the property inherits."""
        cached = self._visibility.get(element.key)
        if cached is not None:
            return cached
        value = self._computed(element, "visibility")
        if not value or value in ("inherit", "unset"):
            parent = element.parent()
            value = self.visibility(parent) if parent is not None else "visible"
        elif value in ("initial", "revert"):
            value = "visible"
        self._visibility[element.key] = value
        return value

    def is_hidden(self, element: ElementView) -> bool:
        if self.display(element) == "none":
            return True
        if self.visibility(element) in ("hidden", "collapse"):
            return True
        return self._computed(element, "content-visibility") == "hidden"

    def pseudo_content(
        self, element: ElementView, pseudo: PseudoElement
    ) -> Optional[str]:
        tag = element.native
        if tag is None:
            return None
        raw = self.stylesheet.cascaded_value(tag, "content", pseudo)
        if raw is None:
            return None
        # ::marker only exists on list items
        if pseudo is PseudoElement.MARKER and self.display(element) != "list-item":
            return None
        text = resolve_content(raw, element.attribute)
        if text is None:
            return None
        box_display = self._computed(element, "display", pseudo) or "inline"
        if box_display.split()[0] == "inline":
            return text
        return f" {text} "
