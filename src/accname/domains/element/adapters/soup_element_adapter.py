"""BeautifulSoup Element Adapter.

Wraps a parsed bs4 tree for the Element domain. Implements the
ElementView and DocumentView protocols from value_objects.py.
"""
from __future__ import annotations

import logging
from typing import Dict, Hashable, Iterator, List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from ..value_objects import Node

logger = logging.getLogger(__name__)


def parse_html(markup: str, parser: str = "html.parser") -> BeautifulSoup:
    """Parse markup into a tree the naming algorithm can read.

    Multi-valued attributes are disabled so that ``class``/``rel``/``headers``
    stay plain strings, the same as ``getAttribute()`` would return them.
    """
    return BeautifulSoup(markup, parser, multi_valued_attributes=None)


class SoupDocument:
    """Document-wide lookups over a BeautifulSoup root."""

    __slots__ = ("_soup",)

    def __init__(self, soup: BeautifulSoup):
        self._soup = soup

    def get_element_by_id(self, element_id: str) -> Optional["SoupElement"]:
        if not element_id:
            return None
        tag = self._soup.find(attrs={"id": element_id})
        return SoupElement(tag) if tag is not None else None

    def iter_elements(self, tag_name: Optional[str] = None) -> Iterator["SoupElement"]:
        for tag in self._soup.find_all(tag_name if tag_name else True):
            yield SoupElement(tag)

    def style_sheets(self) -> List[str]:
        return [style.get_text() for style in self._soup.find_all("style")]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SoupDocument) and other._soup is self._soup

    def __hash__(self) -> int:
        return id(self._soup)


class SoupElement:
    """ElementView over a single bs4 ``Tag``.

    Wrappers are cheap and created on demand; two wrappers around the same
    tag compare equal and share the same visited-set key.
    """

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag):
        self._tag = tag

    @property
    def tag_name(self) -> str:
        return (self._tag.name or "").lower()

    @property
    def key(self) -> Hashable:
        return id(self._tag)

    @property
    def native(self) -> Tag:
        return self._tag

    def attribute(self, name: str) -> Optional[str]:
        value = self._tag.attrs.get(name)
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            # Trees parsed without parse_html() keep class/rel as lists
            return " ".join(value)
        return str(value)

    def has_attribute(self, name: str) -> bool:
        return name in self._tag.attrs

    def attributes(self) -> Dict[str, str]:
        return {name: self.attribute(name) or "" for name in self._tag.attrs}

    def child_nodes(self) -> List[Node]:
        nodes: List[Node] = []
        for child in self._tag.children:
            if isinstance(child, Tag):
                nodes.append(SoupElement(child))
            elif isinstance(child, NavigableString) and not isinstance(
                child, PreformattedString
            ):
                # Comments, CDATA and doctypes are not text nodes
                nodes.append(str(child))
        return nodes

    def children(self) -> List["SoupElement"]:
        return [SoupElement(child) for child in self._tag.children if isinstance(child, Tag)]

    def parent(self) -> Optional["SoupElement"]:
        parent = self._tag.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return SoupElement(parent)

    def document(self) -> Optional[SoupDocument]:
        root: Tag = self._tag
        while root.parent is not None:
            root = root.parent
        if isinstance(root, BeautifulSoup):
            return SoupDocument(root)
        logger.debug("<%s> is detached from any document", self.tag_name)
        return None

    def text_content(self) -> str:
        return self._tag.get_text()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SoupElement) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    def __repr__(self) -> str:
        return f"SoupElement(<{self.tag_name}>)"
