"""accname - accessible name and description computation for HTML."""

from accname.api import (
    compute_accessible_description,
    compute_accessible_name,
    compute_accessible_name_and_description,
    default_service,
    get_role,
    is_interactive,
    is_name_required,
    parse_html,
)
from accname.config import AccNameConfig, configure_logging, load_config
from accname.domains.naming import AccessibleNameComputed, AccessibleNameService, NameResult
from accname.domains.role import RegistryError, RoleClassifier, load_registry
from accname.domains.shared import AccNameError, InvalidElementError

__all__ = [
    "compute_accessible_description",
    "compute_accessible_name",
    "compute_accessible_name_and_description",
    "default_service",
    "get_role",
    "is_interactive",
    "is_name_required",
    "parse_html",
    "AccNameConfig",
    "configure_logging",
    "load_config",
    "AccessibleNameComputed",
    "AccessibleNameService",
    "NameResult",
    "RegistryError",
    "RoleClassifier",
    "load_registry",
    "AccNameError",
    "InvalidElementError",
]

__version__ = "0.1.0"
