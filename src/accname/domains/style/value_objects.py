"""Style Context Value Objects."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class PseudoElement(str, Enum):
    """Generated-content boxes that contribute to an accessible name."""
    BEFORE = "::before"
    AFTER = "::after"
    MARKER = "::marker"

    @classmethod
    def parse(cls, value: str) -> "PseudoElement":
        """Accept both the CSS2 (``:before``) and CSS3 (``::before``) forms."""
        normalized = "::" + value.lstrip(":").lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unsupported pseudo-element: {value!r}")


Specificity = Tuple[int, int, int]


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value [!important]`` pair."""
    prop: str
    value: str
    important: bool = False


@dataclass(frozen=True)
class StyleRule:
    """One selector of a rule set, with the declarations it carries.

    A rule with a selector list (``a, b { ... }``) becomes one StyleRule
    per selector so that each keeps its own specificity.
    """
    selector: str
    pseudo: Optional[PseudoElement]
    declarations: Tuple[Declaration, ...]
    specificity: Specificity
    order: int
