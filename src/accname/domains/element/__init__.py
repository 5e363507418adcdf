"""Element Bounded Context.

Uniform read-only access to markup elements, whether they come from a
parsed BeautifulSoup document or from a virtual ``{tagName, attributes}``
record.
"""
from .value_objects import DocumentView, ElementView, Node
from .adapters import (
    SoupDocument, SoupElement, StrippedElement, VirtualElement, parse_html,
)
from .services import (
    as_element, closest_ancestor, contains, find_descendant, has_tag,
    iter_ancestors, iter_descendants,
)

__all__ = [
    "DocumentView", "ElementView", "Node",
    "SoupDocument", "SoupElement", "StrippedElement", "VirtualElement",
    "parse_html",
    "as_element", "closest_ancestor", "contains", "find_descendant",
    "has_tag", "iter_ancestors", "iter_descendants",
]
