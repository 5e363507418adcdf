"""Role Domain Aggregate Root.

The RoleRegistry is the aggregate root for the Role bounded context. It
owns every RoleData record and the HTML-AAM element tables, and enforces
that every role an element table refers to is actually registered.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Iterator, Mapping, Optional

from ..shared.kernel import AccNameError
from .value_objects import RoleData


class RegistryError(AccNameError):
    """Raised when role or tag data is missing or inconsistent."""


@dataclass
class RoleRegistry:
    """Registry of ARIA roles and implicit element roles.

    The registry is populated once at startup (see ``loader.py``) and is
    read-only afterwards.

    Invariants:
        - Each role name is registered at most once
        - Every role named by a tag, input type or SVG table is registered
    """
    _roles: Dict[str, RoleData] = field(default_factory=dict)
    _default_roles: Dict[str, Optional[str]] = field(default_factory=dict)
    _input_types: Dict[str, Optional[str]] = field(default_factory=dict)
    _combobox_input_types: FrozenSet[str] = frozenset()
    _svg_roles: Dict[str, str] = field(default_factory=dict)

    def register(self, role: RoleData) -> None:
        """Register a role.

        Raises:
            RegistryError: If a role with the same name already exists
        """
        if role.name in self._roles:
            raise RegistryError(f"Role '{role.name}' is registered twice")
        self._roles[role.name] = role

    def set_element_tables(
        self,
        default_roles: Mapping[str, Optional[str]],
        input_types: Mapping[str, Optional[str]],
        combobox_input_types: Iterable[str],
        svg_roles: Mapping[str, str],
    ) -> None:
        """Install the element tables after checking their role references.

        Raises:
            RegistryError: If a table names a role that is not registered
        """
        referenced = {
            **{f"tag <{tag}>": role for tag, role in default_roles.items()},
            **{f"input type={kind}": role for kind, role in input_types.items()},
            **{f"svg <{tag}>": role for tag, role in svg_roles.items()},
        }
        unknown = sorted(
            f"{source} -> {role}"
            for source, role in referenced.items()
            if role is not None and role not in self._roles
        )
        if unknown:
            raise RegistryError(f"Unregistered roles referenced: {', '.join(unknown)}")
        self._default_roles = {tag.lower(): role for tag, role in default_roles.items()}
        self._input_types = {kind.lower(): role for kind, role in input_types.items()}
        self._combobox_input_types = frozenset(kind.lower() for kind in combobox_input_types)
        self._svg_roles = {tag.lower(): role for tag, role in svg_roles.items()}

    def get(self, name: Optional[str]) -> Optional[RoleData]:
        if name is None:
            return None
        return self._roles.get(name)

    def is_role(self, name: str) -> bool:
        return name in self._roles

    def knows_tag(self, tag_name: str) -> bool:
        return tag_name in self._default_roles

    def default_role(self, tag_name: str) -> Optional[str]:
        return self._default_roles.get(tag_name)

    def input_role(self, input_type: Optional[str], has_list: bool) -> Optional[str]:
        """Implicit role of ``<input>`` (HTML-AAM "input" rows).

        A ``list`` attribute turns text-like, missing and unknown types
        into a combobox. Unknown types otherwise behave as ``text``.
        """
        kind = (input_type or "").strip().lower()
        known = kind in self._input_types
        if has_list and (not kind or not known or kind in self._combobox_input_types):
            return "combobox"
        if known:
            return self._input_types[kind]
        return "textbox"

    def svg_role(self, tag_name: str) -> Optional[str]:
        return self._svg_roles.get(tag_name)

    def __len__(self) -> int:
        return len(self._roles)

    def __iter__(self) -> Iterator[RoleData]:
        return iter(self._roles.values())
