"""Layout file parser.

The parser is a small line-driven state machine.  It tracks whether a page
is open, the lines accumulated for it and the current :class:`Style`.  Each
physical line is handled as follows:

* Everything from the first ``//`` onward is a comment and is removed
  before trimming.  A line that becomes empty only because of a comment is
  ignored entirely.
* A blank line inside a page becomes a spacer carrying the current style.
* ``[/label]`` closes the open page, keeping it even when empty.
* ``[label] size, color, align, bottom`` opens a page when none is open and
  restyles the following lines.  Without parameters the style resets to
  the defaults.  A directive without ``]`` is skipped.
* Any other line inside a page is literal text.

An unterminated page at end of input is kept when it holds at least one
line.  Parsing is permissive throughout: malformed directives and unknown
names never raise.
"""

from __future__ import annotations

import os
from collections.abc import Iterable

from layout2pdf.io import read_file
from layout2pdf.utils.logging import get_logger
from layout2pdf.utils.text import split_by_comma, split_lines, trim

from .base import LineSpec, PageSpec
from .style import DEFAULT_FONT_SIZE, Style, style_from_params

__all__ = ["COMMENT_MARKER", "LayoutParser", "parse_layout", "parse_layout_file"]

COMMENT_MARKER = "//"

log = get_logger(__name__)


class LayoutParser:
    """Incremental parser turning layout lines into pages."""

    def __init__(self, default_font_size: int = DEFAULT_FONT_SIZE) -> None:
        self.default_style = Style(font_size=default_font_size)
        self.style = self.default_style
        self.pages: list[PageSpec] = []
        self.in_page = False
        self._lines: list[LineSpec] = []
        self._lineno = 0

    # ------------------------------------------------------------------
    # Line handling
    # ------------------------------------------------------------------

    def feed(self, raw: str) -> None:
        """Process one physical line of input."""

        self._lineno += 1
        comment_pos = raw.find(COMMENT_MARKER)
        before_comment = raw if comment_pos < 0 else raw[:comment_pos]
        line = trim(before_comment)

        if not line:
            if comment_pos >= 0:
                return
            if self.in_page:
                self._lines.append(self.style.line(""))
            return

        if line.startswith("["):
            if line.startswith("[/"):
                self._close_page()
            else:
                self._directive(line)
            return

        if self.in_page:
            self._lines.append(self.style.line(line))

    def _close_page(self) -> None:
        if not self.in_page:
            return
        self.pages.append(PageSpec(tuple(self._lines)))
        self._lines = []
        self.in_page = False

    def _directive(self, line: str) -> None:
        close_pos = line.find("]")
        if close_pos < 0:
            log.debug("line %d: skipping malformed directive %r", self._lineno, line)
            return

        params = trim(line[close_pos + 1 :])
        if not self.in_page:
            self.in_page = True
            self._lines = []

        if params:
            self.style = style_from_params(
                split_by_comma(params), default_font_size=self.default_style.font_size
            )
        else:
            self.style = self.default_style

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def finish(self) -> list[PageSpec]:
        """Flush an unterminated page and return all parsed pages."""

        if self.in_page:
            if self._lines:
                self.pages.append(PageSpec(tuple(self._lines)))
            else:
                log.debug("dropping empty unterminated page at end of input")
            self._lines = []
            self.in_page = False
        return self.pages


def parse_layout(
    lines: Iterable[str] | str, *, default_font_size: int = DEFAULT_FONT_SIZE
) -> list[PageSpec]:
    """Parse layout ``lines`` (or a whole layout string) into pages."""

    if isinstance(lines, str):
        lines = split_lines(lines)
    parser = LayoutParser(default_font_size=default_font_size)
    for raw in lines:
        parser.feed(raw)
    pages = parser.finish()
    log.debug("parsed %d page(s)", len(pages))
    return pages


def parse_layout_file(
    path: str | os.PathLike[str],
    *,
    encoding: str = "utf-8-sig",
    errors: str = "replace",
    default_font_size: int = DEFAULT_FONT_SIZE,
) -> list[PageSpec]:
    """Read ``path`` through the I/O registry and parse it.

    ``FileNotFoundError`` and other ``OSError`` subclasses propagate to the
    caller when the file cannot be opened.  Undecodable bytes are replaced
    according to ``errors``.
    """

    text = read_file(path, encoding=encoding, errors=errors)
    return parse_layout(split_lines(text), default_font_size=default_font_size)
