"""Core layout model.

A layout file is parsed into an ordered list of :class:`PageSpec` objects,
each holding :class:`LineSpec` entries in declaration order.  Every line
carries the complete style that was in effect when it was read; lines never
refer back to parser state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

RGB = tuple[float, float, float]


class Align(Enum):
    """Horizontal alignment of a line within the page margins."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(slots=True, frozen=True)
class LineSpec:
    """One line of text to render.

    An empty ``text`` denotes a spacer: nothing visible is drawn but the line
    still consumes vertical space.
    """

    text: str
    font_size: int = 12
    color: RGB = (0.0, 0.0, 0.0)
    align: Align = Align.LEFT
    bottom_anchor: bool = False

    def __post_init__(self) -> None:
        if self.font_size <= 0:
            raise ValueError("font_size must be positive")
        if any(not 0.0 <= channel <= 1.0 for channel in self.color):
            raise ValueError("color channels must be within [0.0, 1.0]")

    @property
    def is_spacer(self) -> bool:
        return self.text == ""


@dataclass(slots=True, frozen=True)
class PageSpec:
    """Ordered lines of a single page."""

    lines: tuple[LineSpec, ...] = ()

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def top_lines(self) -> list[LineSpec]:
        """Top-anchored lines in declaration order."""

        return [ls for ls in self.lines if not ls.bottom_anchor]

    @property
    def bottom_lines(self) -> list[LineSpec]:
        """Bottom-anchored lines in declaration order."""

        return [ls for ls in self.lines if ls.bottom_anchor]


__all__ = ["RGB", "Align", "LineSpec", "PageSpec"]
