"""Element Context Value Objects.

The naming algorithm never touches a concrete DOM. It reads elements
through the narrow ElementView/DocumentView protocols defined here, which
are implemented by the adapters in ``adapters.py``:

- SoupElement / SoupDocument: a parsed BeautifulSoup tree
- VirtualElement: a ``{"tagName": ..., "attributes": {...}}`` record
- StrippedElement: a detached view with one attribute removed
"""
from __future__ import annotations

from typing import Any, Dict, Hashable, Iterator, List, Optional, Protocol, Union


class DocumentView(Protocol):
    """Protocol for document-wide lookups."""

    def get_element_by_id(self, element_id: str) -> Optional["ElementView"]:
        """Return the first element in document order with this id."""
        ...

    def iter_elements(self, tag_name: Optional[str] = None) -> Iterator["ElementView"]:
        """Yield elements in document order, optionally filtered by tag."""
        ...

    def style_sheets(self) -> List[str]:
        """Return the text of every ``<style>`` element in document order."""
        ...


class ElementView(Protocol):
    """Read-only capability interface over an element.

    Text children are represented as plain ``str`` values inside
    ``child_nodes()``; element children are ElementViews.
    """

    @property
    def tag_name(self) -> str:
        """Lower-cased tag name."""
        ...

    @property
    def key(self) -> Hashable:
        """Identity used by the visited set of a computation."""
        ...

    @property
    def native(self) -> Any:
        """Underlying object (a bs4 ``Tag`` or ``None``)."""
        ...

    def attribute(self, name: str) -> Optional[str]: ...

    def has_attribute(self, name: str) -> bool: ...

    def attributes(self) -> Dict[str, str]: ...

    def child_nodes(self) -> List["Node"]: ...

    def children(self) -> List["ElementView"]: ...

    def parent(self) -> Optional["ElementView"]: ...

    def document(self) -> Optional[DocumentView]: ...

    def text_content(self) -> str: ...


Node = Union[str, ElementView]
