"""Naming Context Value Objects.

The per-tag precedence chains of HTML-AAM "accessible name computation"
live here as data: each chain is the ordered tuple of NameSources tried
for a class of elements, the first non-empty one wins.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class NameResult:
    """Accessible name and description of one element.

    A missing name is the empty string. A missing description is None,
    which is also reported when the description would repeat the name.
    """
    name: str
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description}


@dataclass(frozen=True)
class TraversalOptions:
    """Flags of one step of the generic subtree algorithm.

    Attributes:
        include_hidden: Walk into hidden nodes (true when following an
            ID reference, which counts as explicit inclusion)
        include_naming_prohibited: Take text from roles that may not be
            named by author (true for children and referenced nodes)
    """
    include_hidden: bool = False
    include_naming_prohibited: bool = False


DEFAULT_TRAVERSAL = TraversalOptions()
CHILD_TRAVERSAL = TraversalOptions(include_hidden=False, include_naming_prohibited=True)
REFERENCE_TRAVERSAL = TraversalOptions(include_hidden=True, include_naming_prohibited=True)


class NameSource(str, Enum):
    """One step of a host-language precedence chain."""
    NATIVE_LABEL = "native_label"          # associated <label>s
    ENCLOSING_LABEL = "enclosing_label"    # closest ancestor <label>
    SUBTREE = "subtree"                    # generic subtree algorithm
    TITLE = "title"
    PLACEHOLDER = "placeholder"
    VALUE = "value"
    ALT = "alt"
    EXPLICIT_ALT = "explicit_alt"          # alt, even empty, ends the chain
    LEGEND = "legend"
    FIGCAPTION = "figcaption"
    CAPTION = "caption"
    ANCESTOR_FIGCAPTION = "ancestor_figcaption"


PRECEDENCE_CHAINS: Dict[str, Tuple[NameSource, ...]] = {
    "text_input": (NameSource.NATIVE_LABEL, NameSource.TITLE, NameSource.PLACEHOLDER),
    "button_input": (NameSource.NATIVE_LABEL, NameSource.VALUE, NameSource.TITLE),
    "image_input": (NameSource.NATIVE_LABEL, NameSource.ALT, NameSource.TITLE),
    "form_control": (NameSource.NATIVE_LABEL, NameSource.TITLE),
    "button": (NameSource.ENCLOSING_LABEL, NameSource.SUBTREE, NameSource.TITLE),
    "fieldset": (NameSource.LEGEND, NameSource.TITLE),
    "output": (NameSource.NATIVE_LABEL, NameSource.TITLE),
    "summary": (NameSource.SUBTREE, NameSource.TITLE),
    "figure": (NameSource.FIGCAPTION, NameSource.TITLE),
    "img": (NameSource.EXPLICIT_ALT, NameSource.TITLE, NameSource.ANCESTOR_FIGCAPTION),
    "table": (NameSource.CAPTION, NameSource.TITLE),
    "table_part": (NameSource.TITLE,),
    "link": (NameSource.SUBTREE, NameSource.TITLE),
    "area": (NameSource.ALT, NameSource.TITLE),
    "title_only": (NameSource.TITLE,),
}

TEXT_LEVEL_TAGS = frozenset({
    "abbr", "b", "bdi", "bdo", "br", "cite", "code", "dfn", "em", "i",
    "kbd", "mark", "q", "rp", "ruby", "s", "samp", "small", "strong",
    "sub", "sup", "time", "u", "var", "wbr",
})

# Chains selected by tag alone; <input> and <summary> need attributes/context
TAG_CHAINS: Dict[str, str] = {
    "textarea": "text_input",
    "select": "form_control",
    "button": "button",
    "fieldset": "fieldset",
    "output": "output",
    "figure": "figure",
    "img": "img",
    "table": "table",
    "tr": "table_part",
    "td": "table_part",
    "th": "table_part",
    "a": "link",
    "area": "area",
    "iframe": "title_only",
    "section": "title_only",
    **{tag: "title_only" for tag in TEXT_LEVEL_TAGS},
}

KNOWN_INPUT_TYPES = frozenset({
    "button", "checkbox", "color", "date", "datetime-local", "email",
    "file", "hidden", "image", "month", "number", "password", "radio",
    "range", "reset", "search", "submit", "tel", "text", "time", "url",
    "week",
})
TEXT_INPUT_TYPES = frozenset({"email", "number", "password", "search", "tel", "text", "url"})
BUTTON_INPUT_TYPES = frozenset({"button", "reset", "submit"})

# Elements whose name comes from a host-language label, not content
HOST_LABELLED_TAGS = frozenset({"img", "input", "output", "select", "svg", "textarea"})
LABELABLE_TAGS = frozenset({"input", "output", "select", "textarea"})
