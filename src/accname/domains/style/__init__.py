"""Style Bounded Context.

Visibility, display and generated content as far as accessible name
computation needs them.
"""
from .value_objects import Declaration, PseudoElement, StyleRule
from .aggregates import StyleSheet
from .services import (
    CascadeStyleResolver, NullStyleResolver, StyleResolver, default_display,
    parse_style_sheets,
)

__all__ = [
    "Declaration", "PseudoElement", "StyleRule",
    "StyleSheet",
    "CascadeStyleResolver", "NullStyleResolver", "StyleResolver",
    "default_display", "parse_style_sheets",
]
