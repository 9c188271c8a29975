"""Style resolution for page directives.

Color and alignment names are matched case-insensitively after trimming.
Unknown names never raise: colors fall back to black and alignments to
left.
"""

from __future__ import annotations

from dataclasses import dataclass

from layout2pdf.utils.text import parse_leading_int, to_lower, trim

from .base import RGB, Align, LineSpec

__all__ = [
    "BLACK",
    "COLORS",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_STYLE",
    "Style",
    "color_from_name",
    "align_from_name",
    "resolve_font_size",
    "style_from_params",
]

BLACK: RGB = (0.0, 0.0, 0.0)
DEFAULT_FONT_SIZE = 12

COLORS: dict[str, RGB] = {
    "black": BLACK,
    "white": (1.0, 1.0, 1.0),
    "red": (1.0, 0.0, 0.0),
    "green": (0.0, 1.0, 0.0),
    "blue": (0.0, 0.0, 1.0),
    "gray": (0.5, 0.5, 0.5),
    "grey": (0.5, 0.5, 0.5),
}

_ALIGNS = {"center": Align.CENTER, "right": Align.RIGHT}


def color_from_name(name: str) -> RGB:
    """Return the RGB triple for ``name``; unknown names map to black."""

    return COLORS.get(to_lower(trim(name)), BLACK)


def align_from_name(name: str) -> Align:
    """Return the :class:`Align` for ``name``; anything unrecognised is left."""

    return _ALIGNS.get(to_lower(trim(name)), Align.LEFT)


def resolve_font_size(token: str, default: int = DEFAULT_FONT_SIZE) -> int:
    """Parse a font size, replacing non-positive results with ``default``."""

    size = parse_leading_int(token)
    return size if size > 0 else default


@dataclass(slots=True, frozen=True)
class Style:
    """Style snapshot applied to every line read while it is current."""

    font_size: int = DEFAULT_FONT_SIZE
    color: RGB = BLACK
    align: Align = Align.LEFT
    bottom_anchor: bool = False

    def line(self, text: str) -> LineSpec:
        """Return a :class:`LineSpec` for ``text`` carrying this style."""

        return LineSpec(
            text=text,
            font_size=self.font_size,
            color=self.color,
            align=self.align,
            bottom_anchor=self.bottom_anchor,
        )


DEFAULT_STYLE = Style()


def style_from_params(parts: list[str], default_font_size: int = DEFAULT_FONT_SIZE) -> Style:
    """Build a style from positional directive parameters.

    ``parts`` is ``[size, color, align, anchor]`` with any suffix omitted.
    Missing fields take their defaults; an empty list yields the default
    style for ``default_font_size``.
    """

    size = resolve_font_size(parts[0], default_font_size) if parts else default_font_size
    color = color_from_name(parts[1] if len(parts) >= 2 else "black")
    align = align_from_name(parts[2]) if len(parts) >= 3 else Align.LEFT
    bottom = len(parts) >= 4 and to_lower(trim(parts[3])) == "bottom"
    return Style(font_size=size, color=color, align=align, bottom_anchor=bottom)
