"""Element domain adapters."""
from .soup_element_adapter import SoupDocument, SoupElement, parse_html
from .stripped_element_adapter import StrippedElement
from .virtual_element_adapter import VirtualElement

__all__ = [
    "SoupDocument",
    "SoupElement",
    "StrippedElement",
    "VirtualElement",
    "parse_html",
]
