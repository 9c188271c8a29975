"""Layout file model, style resolution and parsing."""

from .base import Align, LineSpec, PageSpec, RGB
from .parser import parse_layout, parse_layout_file
from .style import DEFAULT_STYLE, Style, align_from_name, color_from_name

__all__ = [
    "Align",
    "RGB",
    "LineSpec",
    "PageSpec",
    "Style",
    "DEFAULT_STYLE",
    "align_from_name",
    "color_from_name",
    "parse_layout",
    "parse_layout_file",
]
