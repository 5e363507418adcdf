"""Host-Language Label Resolver.

Names that HTML and SVG attach to an element from outside its content:
associated ``<label>`` elements, ``alt`` text and SVG ``<title>``/``<desc>``.
"""
from __future__ import annotations

from typing import List

from ..element.services import contains, find_descendant, has_tag
from ..element.value_objects import ElementView
from . import services
from .entities import NamingContext
from .value_objects import LABELABLE_TAGS


def native_label(element: ElementView, context: NamingContext) -> str:
    tag = element.tag_name
    if tag == "img":
        return (element.attribute("alt") or "").strip()
    if tag in LABELABLE_TAGS:
        # a control nested in its own label must not re-enter the label scan
        context.visit(element)
        return _associated_labels(element, context)
    if tag == "svg":
        caption = find_descendant(element, has_tag("title", "desc"))
        return caption.text_content().strip() if caption is not None else ""
    return ""


def _associated_labels(element: ElementView, context: NamingContext) -> str:
    """Names of every <label> that wraps the control or points at its id."""
    document = element.document()
    if document is None:
        return ""
    element_id = element.attribute("id")
    names: List[str] = []
    for label in document.iter_elements("label"):
        if not (contains(label, element) or (element_id and label.attribute("for") == element_id)):
            continue
        name = services.compute_name(label, context)
        if name:
            names.append(name)
    return " ".join(names)
