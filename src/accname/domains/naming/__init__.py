"""Naming Bounded Context.

Accessible name and description computation (W3C AccName 1.2 with the
HTML-AAM host-language rules).
"""
from .value_objects import (
    CHILD_TRAVERSAL, DEFAULT_TRAVERSAL, PRECEDENCE_CHAINS, REFERENCE_TRAVERSAL,
    NameResult, NameSource, TraversalOptions,
)
from .entities import NamingContext
from .events import AccessibleNameComputed
from .services import (
    AccessibleNameService, EventPublisher, compute_description, compute_name,
    compute_root_name, precedence_chain,
)
from .idrefs import resolve_id_refs
from .host_label import native_label

__all__ = [
    "CHILD_TRAVERSAL", "DEFAULT_TRAVERSAL", "PRECEDENCE_CHAINS", "REFERENCE_TRAVERSAL",
    "NameResult", "NameSource", "TraversalOptions",
    "NamingContext",
    "AccessibleNameComputed",
    "AccessibleNameService", "EventPublisher", "compute_description",
    "compute_name", "compute_root_name", "precedence_chain",
    "resolve_id_refs",
    "native_label",
]
