"""ID Reference Resolver.

Follows ``aria-labelledby``, ``aria-describedby`` and ``aria-owns`` to
the elements they name and concatenates their text.
"""
from __future__ import annotations

import logging
from typing import List

from ..element.adapters import StrippedElement
from ..element.value_objects import ElementView
from ..shared.kernel import collapse_whitespace, split_tokens
from . import services
from .entities import NamingContext
from .value_objects import REFERENCE_TRAVERSAL

logger = logging.getLogger(__name__)


def resolve_id_refs(element: ElementView, attribute: str, context: NamingContext) -> str:
    """Concatenate the names of the elements an ID-list attribute points at.

    Referenced elements count as explicitly included, so hidden targets
    and naming-prohibited roles still contribute text. A reference back to
    ``element`` itself is followed with ``attribute`` removed, which stops
    ``<div id="x" aria-labelledby="x">`` from looping while keeping its
    content.

    Without a document the IDs cannot be resolved. Label and description
    references then fall back to the attribute text; ``aria-owns`` yields
    nothing.
    """
    ids = split_tokens(element.attribute(attribute))
    if not ids:
        return ""

    document = element.document()
    if document is None:
        if attribute == "aria-owns":
            return ""
        return collapse_whitespace(element.attribute(attribute) or "")

    names: List[str] = []
    for element_id in ids:
        target = document.get_element_by_id(element_id)
        if target is None:
            logger.debug("%s references missing id %r", attribute, element_id)
            continue
        if target.key == element.key:
            target = StrippedElement(target, attribute)
        name = services.compute_name(target, context, REFERENCE_TRAVERSAL)
        if name:
            names.append(name)
    return " ".join(names).strip()
