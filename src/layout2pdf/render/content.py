"""Per-page content stream builder.

Lines are split by anchor.  Top-anchored lines stack downward from the top
baseline in declaration order.  Bottom-anchored lines stack upward from the
bottom baseline in reverse declaration order, so the last footer line of the
source sits lowest on the page.  Every line, spacers included, advances the
baseline by ``font_size + line_gap``.

Text width is approximated as ``font_size * char_width_factor * len(text)``;
no glyph metrics are consulted.
"""

from __future__ import annotations

from dataclasses import dataclass

from layout2pdf.config import ConfigModel, load_config
from layout2pdf.layout.base import Align, LineSpec, PageSpec
from layout2pdf.utils.text import escape_pdf_string, format_number

__all__ = ["PositionedLine", "text_width", "line_x", "position_lines", "build_page_content"]


@dataclass(slots=True, frozen=True)
class PositionedLine:
    """A line together with its baseline origin on the page."""

    line: LineSpec
    x: float
    y: float


def text_width(line: LineSpec, cfg: ConfigModel) -> float:
    """Approximate rendered width of ``line`` in points."""

    return line.font_size * cfg.text.char_width_factor * len(line.text)


def line_x(line: LineSpec, cfg: ConfigModel) -> float:
    """Return the x origin of ``line``, never left of the left margin."""

    page = cfg.page
    if line.align is Align.LEFT:
        return page.left_margin
    width = text_width(line, cfg)
    if line.align is Align.CENTER:
        x = (page.width - width) / 2.0
    else:
        x = page.width - page.right_margin - width
    return max(x, page.left_margin)


def position_lines(page: PageSpec, cfg: ConfigModel | None = None) -> list[PositionedLine]:
    """Return positioned lines: top lines first, then bottom lines bottom-up."""

    cfg = cfg or load_config()
    gap = cfg.text.line_gap
    positioned: list[PositionedLine] = []

    y = cfg.page.top_baseline
    for ls in page.top_lines:
        positioned.append(PositionedLine(ls, line_x(ls, cfg), y))
        y -= ls.font_size + gap

    y = cfg.page.bottom_baseline
    for ls in reversed(page.bottom_lines):
        positioned.append(PositionedLine(ls, line_x(ls, cfg), y))
        y += ls.font_size + gap

    return positioned


def build_page_content(page: PageSpec, cfg: ConfigModel | None = None) -> str:
    """Return the content stream program drawing ``page``.

    The program is a single ``BT``/``ET`` text object; an empty page yields
    ``"BT\\nET\\n"``.
    """

    cfg = cfg or load_config()
    font = cfg.text.font_resource
    ops = ["BT\n"]
    for pl in position_lines(page, cfg):
        ls = pl.line
        r, g, b = (format_number(c) for c in ls.color)
        ops.append(f"/{font} {ls.font_size} Tf\n")
        ops.append(f"{r} {g} {b} rg\n")
        ops.append(f"1 0 0 1 {format_number(pl.x)} {format_number(pl.y)} Tm\n")
        ops.append(f"({escape_pdf_string(ls.text)}) Tj\n")
    ops.append("ET\n")
    return "".join(ops)
