"""Role registry loader.

Reads ``roles.yaml`` and ``tags.yaml`` (packaged under ``data/`` or from a
directory set via ``ACCNAME_REGISTRY_DIR``) and validates them with
pydantic before building a RoleRegistry.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

import yaml
from pydantic import BaseModel, BeforeValidator, ConfigDict, TypeAdapter, ValidationError

from .aggregates import RegistryError, RoleRegistry
from .value_objects import NameFrom, RoleData, RoleType

logger = logging.getLogger(__name__)

ROLES_FILE = "roles.yaml"
TAGS_FILE = "tags.yaml"

_NAME_FROM_BY_LOWER = {member.value.lower(): member.value for member in NameFrom}


def _normalize_name_from(v: Any) -> Any:
    """Accept ``authorandcontents``/``AUTHOR`` spellings."""
    if isinstance(v, str):
        return _NAME_FROM_BY_LOWER.get(v.strip().lower(), v)
    return v


def _normalize_token(v: Any) -> Any:
    if isinstance(v, str):
        return v.strip().lower()
    return v


NameFromLiteral = Annotated[
    Literal["author", "authorAndContents", "contents", "prohibited"],
    BeforeValidator(_normalize_name_from),
]

Token = Annotated[str, BeforeValidator(_normalize_token)]

RoleTypeLiteral = Annotated[
    Literal[
        "widget", "document", "landmark", "liveregion", "window", "graphics",
        "digitalpublishing",
    ],
    BeforeValidator(_normalize_token),
]


class RoleRecord(BaseModel):
    """One entry of ``roles.yaml``."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    name_from: NameFromLiteral
    type: List[RoleTypeLiteral] = []
    name_required: bool = False
    prohibited: List[Token] = []


class TagTables(BaseModel):
    """Contents of ``tags.yaml``."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    default_roles: Dict[Token, Optional[Token]]
    input_types: Dict[Token, Optional[Token]] = {}
    combobox_input_types: List[Token] = []
    svg_roles: Dict[Token, Token] = {}


_ROLE_TABLE = TypeAdapter(Dict[Token, RoleRecord])


def _packaged_data_dir() -> Any:
    return resources.files(__package__) / "data"


def _read_yaml(source: Any, filename: str) -> Any:
    target = source / filename
    try:
        text = target.read_text(encoding="utf-8")
    except OSError as exc:
        raise RegistryError(f"Cannot read registry file {target}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RegistryError(f"Invalid YAML in {target}: {exc}") from exc


def load_registry(directory: Optional[Union[str, Path]] = None) -> RoleRegistry:
    """Build a RoleRegistry from YAML data files.

    Args:
        directory: Folder holding ``roles.yaml`` and ``tags.yaml``. The
            packaged data is used when omitted.

    Returns:
        A fully populated, validated RoleRegistry.

    Raises:
        RegistryError: If a file is missing, malformed, fails validation,
            or references an unknown role.
    """
    source = Path(directory) if directory else _packaged_data_dir()
    try:
        role_records = _ROLE_TABLE.validate_python(_read_yaml(source, ROLES_FILE))
        tag_tables = TagTables.model_validate(_read_yaml(source, TAGS_FILE))
    except ValidationError as exc:
        raise RegistryError(f"Registry data in {source} failed validation: {exc}") from exc

    registry = RoleRegistry()
    for name, record in role_records.items():
        registry.register(
            RoleData(
                name=name,
                name_from=NameFrom(record.name_from),
                prohibited=frozenset(record.prohibited),
                types=frozenset(RoleType(value) for value in record.type),
                name_required=record.name_required,
            )
        )
    registry.set_element_tables(
        default_roles=tag_tables.default_roles,
        input_types=tag_tables.input_types,
        combobox_input_types=tag_tables.combobox_input_types,
        svg_roles=tag_tables.svg_roles,
    )
    logger.debug(
        "Loaded role registry from %s: %d roles, %d tags",
        source, len(registry), len(tag_tables.default_roles),
    )
    return registry


@lru_cache(maxsize=None)
def cached_registry(directory: Optional[str] = None) -> RoleRegistry:
    """Load a registry once per data directory and reuse it."""
    return load_registry(directory)
