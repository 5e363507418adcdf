"""Element Domain Services.

Boundary conversion (``as_element``) plus the handful of tree walks the
role and naming contexts share. Everything here works on the
ElementView protocol, so both real and virtual trees are supported.
"""
from __future__ import annotations

from typing import Any, Callable, Iterator, Mapping, Optional

from bs4 import BeautifulSoup, Tag

from ..shared.kernel import InvalidElementError
from .adapters import SoupElement, StrippedElement, VirtualElement
from .value_objects import ElementView

ELEMENT_VIEW_TYPES = (SoupElement, VirtualElement, StrippedElement)

ElementPredicate = Callable[[ElementView], bool]


def as_element(value: Any) -> ElementView:
    """Select the ElementView implementation for a caller-supplied value.

    Args:
        value: A bs4 ``Tag``, an existing ElementView, or a mapping with a
            string ``tagName`` and optional ``attributes``/``children``.

    Returns:
        An ElementView wrapping the value.

    Raises:
        InvalidElementError: If the value is not element-like.
    """
    if isinstance(value, ELEMENT_VIEW_TYPES):
        return value
    if isinstance(value, BeautifulSoup):
        raise InvalidElementError(
            "Expected an element, got a whole BeautifulSoup document; "
            "select an element first (e.g. soup.select_one('button'))"
        )
    if isinstance(value, Tag):
        return SoupElement(value)
    if isinstance(value, Mapping):
        return VirtualElement.from_mapping(value)
    raise InvalidElementError(
        f"Expected a bs4 Tag or a {{'tagName': ...}} mapping, got {type(value).__name__}"
    )


def iter_descendants(element: ElementView) -> Iterator[ElementView]:
    """Yield descendant elements in document (pre-)order."""
    stack = list(reversed(element.children()))
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children()))


def find_descendant(element: ElementView, predicate: ElementPredicate) -> Optional[ElementView]:
    """Return the first descendant matching ``predicate`` (querySelector)."""
    for descendant in iter_descendants(element):
        if predicate(descendant):
            return descendant
    return None


def iter_ancestors(element: ElementView) -> Iterator[ElementView]:
    """Yield ancestors from the parent outwards."""
    current = element.parent()
    while current is not None:
        yield current
        current = current.parent()


def closest_ancestor(element: ElementView, predicate: ElementPredicate) -> Optional[ElementView]:
    """Return the nearest ancestor matching ``predicate`` (parentElement.closest)."""
    for ancestor in iter_ancestors(element):
        if predicate(ancestor):
            return ancestor
    return None


def contains(ancestor: ElementView, element: ElementView) -> bool:
    """True when ``element`` is ``ancestor`` or lies inside it."""
    if ancestor.key == element.key:
        return True
    return any(node.key == ancestor.key for node in iter_ancestors(element))


def has_tag(*tag_names: str) -> ElementPredicate:
    """Predicate factory matching any of ``tag_names``."""
    names = frozenset(tag_names)
    return lambda element: element.tag_name in names
