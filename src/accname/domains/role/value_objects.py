"""Role Context Value Objects."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional


class NameFrom(str, Enum):
    """How a role derives its accessible name (WAI-ARIA "Name From")."""
    AUTHOR = "author"
    AUTHOR_AND_CONTENTS = "authorAndContents"
    CONTENTS = "contents"
    PROHIBITED = "prohibited"


class RoleType(str, Enum):
    """Category a role belongs to. Some roles belong to more than one."""
    WIDGET = "widget"
    DOCUMENT = "document"
    LANDMARK = "landmark"
    LIVE_REGION = "liveregion"
    WINDOW = "window"
    GRAPHICS = "graphics"
    DIGITAL_PUBLISHING = "digitalpublishing"


class EmbeddedControl(str, Enum):
    """Roles whose current value stands in for their name when embedded."""
    TEXTBOX = "textbox"
    CHOICE = "choice"
    RANGE = "range"


_EMBEDDED_CONTROLS = {
    "textbox": EmbeddedControl.TEXTBOX,
    "combobox": EmbeddedControl.CHOICE,
    "listbox": EmbeddedControl.CHOICE,
    "meter": EmbeddedControl.RANGE,
    "progressbar": EmbeddedControl.RANGE,
    "scrollbar": EmbeddedControl.RANGE,
    "slider": EmbeddedControl.RANGE,
    "spinbutton": EmbeddedControl.RANGE,
}


@dataclass(frozen=True)
class RoleData:
    """Immutable record of one concrete ARIA role.

    Attributes:
        name: Role token, e.g. "button" or "doc-noteref"
        name_from: Naming method of the role
        prohibited: Attributes that are an authoring error on the role
        types: Categories of the role
        name_required: Whether an element with this role must be named
    """
    name: str
    name_from: NameFrom
    prohibited: FrozenSet[str] = field(default_factory=frozenset)
    types: FrozenSet[RoleType] = field(default_factory=frozenset)
    name_required: bool = False

    def __post_init__(self) -> None:
        if not self.name or self.name != self.name.strip().lower():
            raise ValueError(f"Invalid role name: {self.name!r}")

    def prohibits(self, attribute: str) -> bool:
        return attribute in self.prohibited

    def is_a(self, role_type: RoleType) -> bool:
        return role_type in self.types

    @property
    def embedded_control(self) -> Optional[EmbeddedControl]:
        return _EMBEDDED_CONTROLS.get(self.name)

    def __str__(self) -> str:
        return self.name
