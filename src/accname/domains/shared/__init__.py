"""Shared kernel for the accname bounded contexts."""
from .kernel import (
    AccNameError,
    InvalidElementError,
    collapse_whitespace,
    first_non_empty,
    split_tokens,
)

__all__ = [
    "AccNameError",
    "InvalidElementError",
    "collapse_whitespace",
    "first_non_empty",
    "split_tokens",
]
