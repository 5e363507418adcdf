"""Stripped Element Adapter.

A detached view of an element with one attribute removed. Used to follow
an ID reference that points back at the element holding it
(``<div id="x" aria-labelledby="x">``) without recursing forever and
without writing anything into the caller's tree.
"""
from __future__ import annotations

from typing import Any, Dict, Hashable, List, Optional

from ..value_objects import DocumentView, ElementView, Node


class StrippedElement:
    """ElementView that hides ``removed`` and delegates everything else.

    It has its own identity, so it is not considered visited just because
    the element it was derived from is.
    """

    __slots__ = ("_source", "_removed")

    def __init__(self, source: ElementView, removed: str):
        self._source = source
        self._removed = removed

    @property
    def tag_name(self) -> str:
        return self._source.tag_name

    @property
    def key(self) -> Hashable:
        return self

    @property
    def native(self) -> Any:
        return self._source.native

    def attribute(self, name: str) -> Optional[str]:
        if name == self._removed:
            return None
        return self._source.attribute(name)

    def has_attribute(self, name: str) -> bool:
        return name != self._removed and self._source.has_attribute(name)

    def attributes(self) -> Dict[str, str]:
        attributes = self._source.attributes()
        attributes.pop(self._removed, None)
        return attributes

    def child_nodes(self) -> List[Node]:
        return self._source.child_nodes()

    def children(self) -> List[ElementView]:
        return self._source.children()

    def parent(self) -> Optional[ElementView]:
        return self._source.parent()

    def document(self) -> Optional[DocumentView]:
        return self._source.document()

    def text_content(self) -> str:
        return self._source.text_content()

    def __repr__(self) -> str:
        return f"StrippedElement(<{self.tag_name}> without {self._removed})"
