"""Public entry points.

Thin functions over a lazily built, shared AccessibleNameService. Callers
needing their own registry or an event publisher construct
``AccessibleNameService`` directly.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional

from bs4 import BeautifulSoup

from .config import load_config
from .domains.element.adapters import parse_html as _parse_html
from .domains.naming.services import AccessibleNameService
from .domains.naming.value_objects import NameResult
from .domains.role.loader import cached_registry
from .domains.role.services import RoleClassifier


@lru_cache(maxsize=1)
def default_service() -> AccessibleNameService:
    """The service behind the module-level functions."""
    config = load_config()
    return AccessibleNameService(RoleClassifier(cached_registry(config.registry_dir)))


def compute_accessible_name_and_description(element: Any) -> NameResult:
    """Compute the accessible name and description of an element.

    Args:
        element: A bs4 ``Tag`` or a ``{"tagName": ..., "attributes": {...}}``
            mapping (optionally with ``"children"``).

    Returns:
        NameResult with ``name`` (``""`` when absent) and ``description``
        (None when absent or equal to the name).

    Raises:
        InvalidElementError: If ``element`` is not element-like.
    """
    return default_service().compute(element)


def compute_accessible_name(element: Any) -> str:
    return compute_accessible_name_and_description(element).name


def compute_accessible_description(element: Any) -> Optional[str]:
    return compute_accessible_name_and_description(element).description


def get_role(element: Any) -> Optional[str]:
    """ARIA role name computation treats ``element`` as, or None."""
    return default_service().role(element)


def is_interactive(element: Any) -> bool:
    """Whether a user can operate ``element`` (enabled widget, dialog, input)."""
    return default_service().is_interactive(element)


def is_name_required(role: str) -> bool:
    """Whether ARIA requires elements with ``role`` to have an accessible name.

    Unknown and abstract roles never require one.
    """
    return default_service().classifier.is_name_required(role)


def parse_html(markup: str, parser: Optional[str] = None) -> BeautifulSoup:
    """Parse markup with the configured BeautifulSoup tree builder."""
    return _parse_html(markup, parser or load_config().html_parser)
