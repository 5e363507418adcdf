"""Virtual Element Adapter.

Lets callers that have no parsed document (lint rules, component
metadata, tests) describe an element as a plain mapping:

    {"tagName": "button", "attributes": {"aria-label": "Close"}}

An optional ``children`` list of strings and nested mappings is accepted.
Virtual elements have no document, so ID references and ``<label>``
lookups degrade the way a detached element would.
"""
from __future__ import annotations

from typing import Any, Dict, Hashable, List, Mapping, Optional

from ...shared.kernel import InvalidElementError
from ..value_objects import Node


def _normalize_attributes(raw: Any) -> Dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise InvalidElementError(
            f"'attributes' must be a mapping, got {type(raw).__name__}"
        )
    attributes: Dict[str, str] = {}
    for name, value in raw.items():
        # Boolean attributes follow DOM semantics: present or absent
        if value is None or value is False:
            continue
        attributes[str(name).lower()] = "" if value is True else str(value)
    return attributes


class VirtualElement:
    """ElementView over a ``{tagName, attributes, children}`` record."""

    __slots__ = ("_tag_name", "_attributes", "_child_nodes", "_parent")

    def __init__(
        self,
        tag_name: str,
        attributes: Optional[Dict[str, str]] = None,
        parent: Optional["VirtualElement"] = None,
    ):
        self._tag_name = tag_name.lower()
        self._attributes = dict(attributes or {})
        self._child_nodes: List[Node] = []
        self._parent = parent

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        parent: Optional["VirtualElement"] = None,
    ) -> "VirtualElement":
        """Build a virtual element (and its children) from a mapping.

        Raises:
            InvalidElementError: If ``tagName`` is missing or not a string,
                or a child is neither a string nor a mapping.
        """
        tag_name = data.get("tagName")
        if not isinstance(tag_name, str) or not tag_name.strip():
            raise InvalidElementError(
                "Virtual element must have a non-empty string 'tagName'"
            )
        element = cls(
            tag_name.strip(),
            _normalize_attributes(data.get("attributes")),
            parent=parent,
        )
        for child in data.get("children") or ():
            if isinstance(child, str):
                element._child_nodes.append(child)
            elif isinstance(child, Mapping):
                element._child_nodes.append(cls.from_mapping(child, parent=element))
            else:
                raise InvalidElementError(
                    f"Virtual element children must be strings or mappings, "
                    f"got {type(child).__name__}"
                )
        return element

    @property
    def tag_name(self) -> str:
        return self._tag_name

    @property
    def key(self) -> Hashable:
        return self

    @property
    def native(self) -> None:
        return None

    def attribute(self, name: str) -> Optional[str]:
        return self._attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def attributes(self) -> Dict[str, str]:
        return dict(self._attributes)

    def child_nodes(self) -> List[Node]:
        return list(self._child_nodes)

    def children(self) -> List["VirtualElement"]:
        return [node for node in self._child_nodes if isinstance(node, VirtualElement)]

    def parent(self) -> Optional["VirtualElement"]:
        return self._parent

    def document(self) -> None:
        return None

    def text_content(self) -> str:
        parts: List[str] = []
        for node in self._child_nodes:
            parts.append(node if isinstance(node, str) else node.text_content())
        return "".join(parts)

    def __repr__(self) -> str:
        return f"VirtualElement(<{self._tag_name}>)"
