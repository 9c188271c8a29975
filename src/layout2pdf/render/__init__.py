"""Page content streams and PDF document serialization."""

from .assembler import PdfObject, assemble_pdf, build_objects
from .content import PositionedLine, build_page_content, position_lines

__all__ = [
    "PdfObject",
    "PositionedLine",
    "assemble_pdf",
    "build_objects",
    "build_page_content",
    "position_lines",
]
