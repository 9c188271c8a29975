"""Pure string helpers used by the layout parser and the PDF emitter.

Whitespace handling follows the C locale: only space, tab, newline, vertical
tab, form feed and carriage return count as whitespace.  Non-ASCII
characters are never stripped.
"""

from __future__ import annotations

import re
import string

__all__ = [
    "WHITESPACE",
    "trim",
    "to_lower",
    "split_by_comma",
    "parse_leading_int",
    "escape_pdf_string",
    "format_number",
    "split_lines",
]

WHITESPACE: str = " \t\n\v\f\r"

_LEADING_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_PDF_SPECIAL = str.maketrans({"(": "\\(", ")": "\\)", "\\": "\\\\"})


def trim(s: str) -> str:
    """Return ``s`` without leading and trailing ASCII whitespace."""

    return s.strip(WHITESPACE)


def to_lower(s: str) -> str:
    """Lower-case ASCII letters only, leaving other characters untouched."""

    return s.translate(_ASCII_LOWER)


def split_by_comma(s: str) -> list[str]:
    """Split ``s`` on commas, trimming every part.

    Interior empty parts are kept but a trailing empty part is dropped, so
    ``"14, red,"`` yields ``["14", "red"]`` while ``"14,,center"`` yields
    ``["14", "", "center"]``.
    """

    parts = s.split(",")
    if parts and parts[-1] == "":
        parts.pop()
    return [trim(p) for p in parts]


def parse_leading_int(s: str) -> int:
    """Parse the integer prefix of ``s`` the way ``atoi`` does.

    Leading whitespace and an optional sign are accepted; parsing stops at the
    first non-digit.  Returns ``0`` when no digits are found.
    """

    match = _LEADING_INT_RE.match(s)
    if match is None:
        return 0
    return int(match.group(1))


def escape_pdf_string(s: str) -> str:
    """Escape ``(``, ``)`` and ``\\`` for use inside a PDF literal string."""

    return s.translate(_PDF_SPECIAL)


def format_number(value: float) -> str:
    """Render ``value`` in shortest general form with six significant digits."""

    text = f"{value:g}"
    return "0" if text == "-0" else text


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n`` the way line-by-line file reading does.

    A trailing newline does not produce an extra empty line and an empty
    string yields no lines at all.  ``\\r`` is kept and left to :func:`trim`.
    """

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines
