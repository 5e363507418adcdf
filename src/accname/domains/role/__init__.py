"""Role Bounded Context.

ARIA role records, HTML-AAM implicit element roles, and the classifier
that decides which role name computation sees for an element.
"""
from .value_objects import EmbeddedControl, NameFrom, RoleData, RoleType
from .aggregates import RegistryError, RoleRegistry
from .loader import cached_registry, load_registry
from .services import RoleClassifier

__all__ = [
    "EmbeddedControl", "NameFrom", "RoleData", "RoleType",
    "RegistryError", "RoleRegistry",
    "cached_registry", "load_registry",
    "RoleClassifier",
]
