"""Naming Domain Events.

Events emitted after name computation for observability and auditing
(e.g. an accessibility linter collecting unnamed controls).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AccessibleNameComputed:
    """Emitted when a top-level name/description computation finishes.

    Consumers:
    - Audit tooling (report controls whose name is empty)
    - Diagnostics (nodes_visited shows how far references were followed)
    """
    tag_name: str
    role: Optional[str]
    name: str
    description: Optional[str]
    nodes_visited: int
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def is_unnamed(self) -> bool:
        return not self.name
