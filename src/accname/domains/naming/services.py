"""Naming Domain Service.

Implements W3C AccName 1.2 on top of the element, style and role
contexts:

- ``compute_name``: the generic recursive subtree algorithm
- ``AccessibleNameService``: top-level dispatch over the HTML-AAM
  precedence chains, the description step, and event publishing

``compute_name``, ``resolve_id_refs`` and ``native_label`` recurse into
each other; all three share one NamingContext so that every element
contributes text at most once.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from ..element.services import (
    as_element, closest_ancestor, find_descendant, has_tag, iter_descendants,
)
from ..element.value_objects import ElementView
from ..role.services import RoleClassifier
from ..role.value_objects import EmbeddedControl, NameFrom
from ..shared.kernel import collapse_whitespace, first_non_empty
from ..style.value_objects import PseudoElement
from . import host_label, idrefs
from .entities import NamingContext
from .events import AccessibleNameComputed
from .value_objects import (
    BUTTON_INPUT_TYPES, CHILD_TRAVERSAL, DEFAULT_TRAVERSAL, HOST_LABELLED_TAGS,
    KNOWN_INPUT_TYPES, PRECEDENCE_CHAINS, TAG_CHAINS, TEXT_INPUT_TYPES,
    NameResult, NameSource, TraversalOptions,
)

logger = logging.getLogger(__name__)

CAPTION_TRAVERSAL = TraversalOptions(include_hidden=False, include_naming_prohibited=True)


class EventPublisher(Protocol):
    """Protocol for publishing domain events."""
    def publish(self, event: object) -> None: ...


# ============================================================
# Element helpers
# ============================================================


def tooltip(element: ElementView) -> str:
    """``title`` of elements whose title is not claimed by a host-language rule."""
    if element.tag_name in HOST_LABELLED_TAGS:
        return ""
    return (element.attribute("title") or "").strip()


def control_value(element: ElementView) -> str:
    """Current value of a form control, as far as markup can tell."""
    tag = element.tag_name
    if tag == "input":
        return element.attribute("value") or ""
    if tag == "textarea":
        return element.text_content()
    if tag == "select":
        option = _selected_native_option(element)
        if option is None:
            return ""
        value = option.attribute("value")
        return value if value is not None else collapse_whitespace(option.text_content())
    return ""


def _selected_native_option(select: ElementView) -> Optional[ElementView]:
    first = None
    for option in iter_descendants(select):
        if option.tag_name != "option":
            continue
        if option.has_attribute("selected"):
            return option
        if first is None:
            first = option
    return first


def _is_selected_option(element: ElementView) -> bool:
    if element.tag_name != "option" and element.attribute("role") != "option":
        return False
    return element.attribute("aria-selected") == "true" or element.has_attribute("selected")


def selected_option(element: ElementView) -> Optional[ElementView]:
    """First selected option inside a choice widget, else its first <option>."""
    option = find_descendant(element, _is_selected_option)
    if option is None:
        option = find_descendant(element, has_tag("option"))
    return option


def _parent_is_details(element: ElementView) -> bool:
    parent = element.parent()
    return parent is not None and parent.tag_name == "details"


# ============================================================
# Generic subtree algorithm
# ============================================================


def compute_name(
    element: ElementView,
    context: NamingContext,
    options: TraversalOptions = DEFAULT_TRAVERSAL,
) -> str:
    """Compute the text alternative of ``element`` and its subtree.

    Args:
        element: Node to name
        context: Per-call state shared by the whole recursion
        options: Whether hidden and naming-prohibited nodes contribute

    Returns:
        The collapsed, trimmed name; ``""`` when nothing applies.
    """
    if not context.visit(element):
        logger.debug("<%s> already contributed text, skipping", element.tag_name)
        return ""

    aria_label = (element.attribute("aria-label") or "").strip()
    labelledby = (element.attribute("aria-labelledby") or "").strip()
    role = context.role_of(element)
    role_name = role.name if role is not None else None

    if (
        role is not None
        and role.prohibits("aria-label")
        and not options.include_naming_prohibited
        and not aria_label
        and not labelledby
    ):
        return ""

    if not options.include_hidden and context.is_hidden(element):
        return ""

    if labelledby:
        return idrefs.resolve_id_refs(element, "aria-labelledby", context)

    if role is not None and role.name_from is NameFrom.AUTHOR:
        author_name = first_non_empty((
            aria_label,
            host_label.native_label(element, context),
            tooltip(element),
        ))
        if author_name:
            return author_name

    control = role.embedded_control if role is not None else None
    if control is EmbeddedControl.TEXTBOX:
        value = control_value(element).strip()
        if value:
            return value
    elif control is EmbeddedControl.CHOICE:
        value = control_value(element).strip()
        if value:
            return value
        option = selected_option(element)
        if option is not None:
            return compute_name(option, context, options)
        title = tooltip(element)
        if title:
            return title
    elif control is EmbeddedControl.RANGE:
        value = first_non_empty((
            element.attribute("aria-valuetext"),
            element.attribute("aria-valuenow"),
            control_value(element),
        ))
        if value:
            return value

    if aria_label and element.tag_name != "slot":
        return aria_label

    if element.tag_name in HOST_LABELLED_TAGS and role_name not in ("presentation", "none"):
        return host_label.native_label(element, context)

    # <aside> content never names the landmark
    if role_name == "complementary":
        return ""

    name = collapse_whitespace(_accumulate_content(element, context))
    if not name:
        name = tooltip(element)
    return name


def _accumulate_content(element: ElementView, context: NamingContext) -> str:
    text = context.style.pseudo_content(element, PseudoElement.BEFORE) or ""

    for node in element.child_nodes():
        if isinstance(node, str):
            text += node
            continue
        if context.is_visited(node):
            continue
        child_role = context.role_of(node)
        if child_role is not None and child_role.name == "menu":
            continue
        child_name = compute_name(node, context, CHILD_TRAVERSAL)
        if child_name:
            if text and context.style.display(node) != "inline":
                text += f" {child_name} "
            else:
                text += child_name
        elif node.tag_name == "br":
            text += " "

    text += context.style.pseudo_content(element, PseudoElement.MARKER) or ""
    text += context.style.pseudo_content(element, PseudoElement.AFTER) or ""

    owned = idrefs.resolve_id_refs(element, "aria-owns", context)
    if owned:
        text += f" {owned}"
    return text


# ============================================================
# Top-level dispatch
# ============================================================


def precedence_chain(element: ElementView) -> Optional[str]:
    """Name of the host-language precedence chain for ``element``, if any."""
    tag = element.tag_name
    if tag == "input":
        input_type = (element.attribute("type") or "").strip().lower()
        if input_type in BUTTON_INPUT_TYPES:
            return "button_input"
        if input_type == "image":
            return "image_input"
        if input_type in TEXT_INPUT_TYPES or input_type not in KNOWN_INPUT_TYPES:
            return "text_input"
        return "form_control"
    if tag == "summary":
        return "summary" if _parent_is_details(element) else None
    return TAG_CHAINS.get(tag)


def _non_empty(value: Optional[str]) -> Optional[str]:
    if value and value.strip():
        return value.strip()
    return None


def _first_descendant_name(
    element: Optional[ElementView],
    tag_name: str,
    context: NamingContext,
    options: TraversalOptions,
) -> Optional[str]:
    if element is None:
        return None
    target = find_descendant(element, has_tag(tag_name))
    if target is None:
        return None
    return _non_empty(compute_name(target, context, options))


def resolve_source(
    source: NameSource, element: ElementView, context: NamingContext
) -> Optional[str]:
    """Value of one chain step. None means "try the next step"."""
    if source is NameSource.NATIVE_LABEL:
        return _non_empty(host_label.native_label(element, context))
    if source is NameSource.ENCLOSING_LABEL:
        label = closest_ancestor(element, has_tag("label"))
        if label is None:
            return None
        return _non_empty(compute_name(label, context))
    if source is NameSource.SUBTREE:
        return _non_empty(compute_name(element, context))
    if source is NameSource.EXPLICIT_ALT:
        if element.has_attribute("alt"):
            return (element.attribute("alt") or "").strip()
        return None
    if source is NameSource.LEGEND:
        return _first_descendant_name(element, "legend", context, DEFAULT_TRAVERSAL)
    if source is NameSource.FIGCAPTION:
        return _first_descendant_name(element, "figcaption", context, CAPTION_TRAVERSAL)
    if source is NameSource.CAPTION:
        return _first_descendant_name(element, "caption", context, CAPTION_TRAVERSAL)
    if source is NameSource.ANCESTOR_FIGCAPTION:
        figure = closest_ancestor(element, has_tag("figure"))
        return _first_descendant_name(figure, "figcaption", context, CAPTION_TRAVERSAL)
    # title, placeholder, value and alt are plain attributes
    return _non_empty(element.attribute(source.value))


def apply_chain(
    chain: Tuple[NameSource, ...], element: ElementView, context: NamingContext
) -> str:
    for source in chain:
        value = resolve_source(source, element, context)
        if value is not None:
            logger.debug("<%s> named from %s", element.tag_name, source.value)
            return value
    return ""


def compute_root_name(element: ElementView, context: NamingContext) -> str:
    """Name of the element a caller asked about.

    Author naming (``aria-label``/``aria-labelledby``) always goes through
    the generic algorithm; otherwise the host-language chain for the tag
    applies when there is one.
    """
    authored = first_non_empty((
        element.attribute("aria-label"),
        element.attribute("aria-labelledby"),
    ))
    if not authored:
        chain = precedence_chain(element)
        if chain is not None:
            return apply_chain(PRECEDENCE_CHAINS[chain], element, context)
    return compute_name(element, context)


def compute_description(
    element: ElementView, context: NamingContext, name: str
) -> Optional[str]:
    """Accessible description, or None when absent or equal to the name."""
    if element.attribute("aria-describedby"):
        description = idrefs.resolve_id_refs(element, "aria-describedby", context)
    else:
        description = element.attribute("aria-description") or element.attribute("title") or ""
    description = description.strip()
    if not description or description == name:
        return None
    return description


# ============================================================
# Service
# ============================================================


@dataclass
class AccessibleNameService:
    """Computes accessible names and descriptions.

    Each call builds a fresh NamingContext, so a service instance can be
    shared freely.

    Usage:

        service = AccessibleNameService(RoleClassifier(cached_registry()))
        soup = parse_html('<label for="q">Search</label><input id="q">')
        result = service.compute(soup.select_one("input"))
        # result.name == "Search"
        # result.description is None
    """
    classifier: RoleClassifier
    event_publisher: Optional[EventPublisher] = None

    def compute(self, element: object) -> NameResult:
        """Compute name and description of an element-like value.

        Raises:
            InvalidElementError: If ``element`` is not element-like
        """
        view = as_element(element)
        context = NamingContext.for_element(view, self.classifier)

        name = compute_root_name(view, context)
        description = compute_description(view, context, name)

        logger.debug(
            "Computed name %r for <%s> (%d nodes visited)",
            name, view.tag_name, context.nodes_visited,
        )
        self._publish(AccessibleNameComputed(
            tag_name=view.tag_name,
            role=self.classifier.role_name(view),
            name=name,
            description=description,
            nodes_visited=context.nodes_visited,
        ))
        return NameResult(name=name, description=description)

    def name(self, element: object) -> str:
        return self.compute(element).name

    def description(self, element: object) -> Optional[str]:
        return self.compute(element).description

    def role(self, element: object) -> Optional[str]:
        return self.classifier.role_name(as_element(element))

    def is_interactive(self, element: object) -> bool:
        return self.classifier.is_interactive(as_element(element))

    def _publish(self, event: object) -> None:
        if self.event_publisher:
            self.event_publisher.publish(event)
