"""Role Domain Service.

The RoleClassifier maps an element to the ARIA role that name
computation should treat it as. It coordinates between:
- RoleRegistry (role records and HTML-AAM element tables)
- the element's ancestry (tables, lists, landmarks, grids)

Ancestor-dependent rules need to know whether the element's ancestry is
known. A virtual element built without a parent has unknown ancestry,
so those rules fall back to the tag's default role.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..element.services import closest_ancestor, find_descendant, has_tag
from ..element.value_objects import ElementView
from ..shared.kernel import first_non_empty, split_tokens
from .aggregates import RoleRegistry
from .value_objects import RoleData, RoleType

logger = logging.getLogger(__name__)

LANDMARK_ROLES = frozenset({
    "banner", "complementary", "contentinfo", "form", "main",
    "navigation", "region", "search",
})
LANDMARK_TAGS = frozenset({"article", "aside", "main", "nav", "section"})

SECTIONING_ROLES = frozenset({"article", "complementary", "navigation", "region"})
SECTIONING_TAGS = frozenset({"article", "aside", "nav", "section"})

LIST_TAGS = frozenset({"menu", "ol", "ul"})
GRID_ROLES = frozenset({"grid", "treegrid"})

# Attributes that make an SVG shape worth exposing
SVG_LABEL_ATTRIBUTES = (
    "aria-label", "aria-labelledby", "aria-describedby", "aria-roledescription",
)


def _matches(element: ElementView, tags: frozenset, roles: frozenset) -> bool:
    """``tag:not([role])`` for any tag in ``tags``, or ``[role=r]`` for r in ``roles``."""
    role = element.attribute("role")
    if role is None:
        return element.tag_name in tags
    return role in roles


def _ancestry_known(element: ElementView) -> bool:
    return element.parent() is not None or element.document() is not None


def _has_author_name(element: ElementView) -> bool:
    """Cheap attribute-only name check used to pick img/aside/section roles."""
    return bool(first_non_empty((
        element.attribute("aria-label"),
        element.attribute("aria-labelledby"),
        element.attribute("alt"),
        element.attribute("title"),
    )))


def _is_aria_hidden(element: ElementView) -> bool:
    return element.attribute("aria-hidden") in ("", "true")


def _is_disabled(element: ElementView) -> bool:
    return element.has_attribute("disabled") or element.attribute("aria-disabled") in ("", "true")


def _parse_size(value: Optional[str]) -> float:
    try:
        return float(value) if value else 0.0
    except ValueError:
        return 0.0


@dataclass
class RoleClassifier:
    """Classifies elements into ARIA roles.

    Usage:

        classifier = RoleClassifier(cached_registry())
        classifier.role_of(as_element(soup.select_one("td")))  # RoleData("cell")
        classifier.role_name(as_element({"tagName": "input", "attributes": {"type": "range"}}))
        # "slider"
    """
    registry: RoleRegistry

    def role_of(self, element: ElementView) -> Optional[RoleData]:
        """Return the role record for an element, or None for no role."""
        return self.registry.get(self.role_name(element))

    def role_name(self, element: ElementView) -> Optional[str]:
        """Return the role token for an element, or None for no role."""
        explicit = self.explicit_role(element)
        if explicit is not None:
            return explicit
        return self.resolve_incomplete_role(element)

    def is_name_required(self, role: Optional[str]) -> bool:
        """Whether ARIA requires an accessible name for ``role``."""
        record = self.registry.get(role)
        return record is not None and record.name_required

    def is_interactive(self, element: ElementView) -> bool:
        """Whether the element is a control a user can operate.

        Windows (dialogs) always are. Widgets are unless disabled, and a
        widget role put on an element that is not natively a widget also
        needs a ``tabindex``.
        """
        role = self.role_of(element)
        if role is None:
            # every <input> that renders is operable, whatever its type
            input_type = (element.attribute("type") or "").strip().lower()
            return element.tag_name == "input" and input_type != "hidden"

        if role.name == "separator":
            return element.has_attribute("tabindex") and element.has_attribute("aria-valuenow")
        if role.name == "row":
            return element.has_attribute("tabindex") and self._has_ancestor(
                element, frozenset(), GRID_ROLES
            )

        if role.is_a(RoleType.WINDOW):
            return True
        if not role.is_a(RoleType.WIDGET):
            return False
        if _is_disabled(element):
            return False

        intrinsic = self.registry.get(self.resolve_incomplete_role(element))
        if intrinsic is None or not intrinsic.is_a(RoleType.WIDGET):
            return element.has_attribute("tabindex")
        return True

    def explicit_role(self, element: ElementView) -> Optional[str]:
        """First token of ``role`` that names a registered role.

        Unknown tokens are fallbacks for older user agents and are skipped.
        """
        for token in split_tokens((element.attribute("role") or "").lower()):
            if self.registry.is_role(token):
                return token
        return None

    def resolve_incomplete_role(self, element: ElementView) -> Optional[str]:
        """Implicit role of an element, applying HTML-AAM per-tag rules."""
        tag = element.tag_name
        default = self.registry.default_role(tag)

        if tag in ("a", "area"):
            return default if element.has_attribute("href") else "generic"

        if tag == "aside":
            if _has_author_name(element):
                return default
            if _ancestry_known(element) and self._has_ancestor(
                element, SECTIONING_TAGS, SECTIONING_ROLES
            ):
                return "generic"
            return default

        if tag in ("header", "footer"):
            if _ancestry_known(element) and self._has_ancestor(
                element, LANDMARK_TAGS, LANDMARK_ROLES
            ):
                return "generic"
            return default

        if tag == "img":
            return "img" if _has_author_name(element) else "none"

        if tag == "input":
            return self.registry.input_role(
                element.attribute("type"), element.has_attribute("list")
            )

        if tag == "li":
            if _ancestry_known(element) and not self._has_ancestor(
                element, LIST_TAGS, frozenset({"list"})
            ):
                return "generic"
            return default

        if tag == "section":
            return default if _has_author_name(element) else "generic"

        if tag == "select":
            if element.has_attribute("multiple") or _parse_size(element.attribute("size")) > 1:
                return "listbox"
            return "combobox"

        if tag == "td":
            if not _ancestry_known(element):
                return default
            if self._has_ancestor(element, frozenset(), GRID_ROLES):
                return "gridcell"
            return default if self._has_table_ancestor(element) else None

        if tag == "th":
            if _ancestry_known(element) and not self._has_table_ancestor(element):
                return None
            return "rowheader" if element.attribute("scope") == "row" else default

        if tag == "tr":
            if _ancestry_known(element) and not self._has_table_ancestor(element):
                return None
            return default

        svg_role = self.registry.svg_role(tag)
        if svg_role is not None:
            return svg_role if self._is_exposed_svg_shape(element) else default

        if not self.registry.knows_tag(tag):
            logger.debug("No implicit role mapping for <%s>", tag)
        return default

    def _has_ancestor(
        self, element: ElementView, tags: frozenset, roles: frozenset
    ) -> bool:
        return closest_ancestor(element, lambda node: _matches(node, tags, roles)) is not None

    def _has_table_ancestor(self, element: ElementView) -> bool:
        return closest_ancestor(
            element,
            lambda node: node.tag_name == "table" or node.attribute("role") == "table",
        ) is not None

    def _is_exposed_svg_shape(self, element: ElementView) -> bool:
        labelled = first_non_empty(element.attribute(name) for name in SVG_LABEL_ATTRIBUTES)
        if labelled and not _is_aria_hidden(element):
            return True
        described = find_descendant(element, has_tag("title", "desc"))
        return described is not None and bool(described.text_content().strip())
