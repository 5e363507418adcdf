"""Naming Context Entities."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Hashable, Optional, Set

from ..element.value_objects import ElementView
from ..role.services import RoleClassifier
from ..role.value_objects import RoleData
from ..style.services import CascadeStyleResolver, NullStyleResolver, StyleResolver

logger = logging.getLogger(__name__)


@dataclass
class NamingContext:
    """State of one top-level name/description computation.

    A fresh context is created per public call and threaded explicitly
    through every recursive step; it is discarded when the call returns.

    Invariants:
        - An element is processed for text at most once per context
        - Role lookups are stable for the lifetime of the context
    """
    classifier: RoleClassifier
    style: StyleResolver
    visited: Set[Hashable] = field(default_factory=set)
    _roles: Dict[Hashable, Optional[RoleData]] = field(default_factory=dict, repr=False)

    @classmethod
    def for_element(
        cls, element: ElementView, classifier: RoleClassifier
    ) -> "NamingContext":
        """Create a context whose style engine matches the element's tree."""
        document = element.document()
        style: StyleResolver
        if document is not None:
            style = CascadeStyleResolver.for_document(document)
        else:
            style = NullStyleResolver()
        return cls(classifier=classifier, style=style)

    def visit(self, element: ElementView) -> bool:
        """Mark an element visited. Returns False if it already was."""
        if element.key in self.visited:
            return False
        self.visited.add(element.key)
        return True

    def is_visited(self, element: ElementView) -> bool:
        return element.key in self.visited

    def role_of(self, element: ElementView) -> Optional[RoleData]:
        key = element.key
        if key not in self._roles:
            self._roles[key] = self.classifier.role_of(element)
        return self._roles[key]

    def is_hidden(self, element: ElementView) -> bool:
        """``aria-hidden="true"`` (or empty), or hidden by CSS."""
        if element.attribute("aria-hidden") in ("", "true"):
            return True
        return self.style.is_hidden(element)

    @property
    def nodes_visited(self) -> int:
        return len(self.visited)
