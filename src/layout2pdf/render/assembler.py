"""PDF document assembler.

Objects are numbered deterministically for ``N`` pages:

==============  ==========================================
1               Catalog, ``/Pages 2 0 R``
2               Pages tree, ``/Kids`` = objects ``4 .. 3+N``
3               Type1 font resource
4 .. 3+N        Page dictionaries
4+N .. 3+2N     Content streams, one per page
==============  ==========================================

Serialization writes a ``%PDF-1.4`` header and a binary marker comment,
then every object in ascending order while recording its byte offset, then a
classic cross-reference table, the trailer and ``%%EOF``.  Nothing depends
on time or randomness, so identical pages always produce identical bytes.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from layout2pdf.config import ConfigModel, load_config
from layout2pdf.layout.base import PageSpec
from layout2pdf.utils.errors import EmptyLayoutError
from layout2pdf.utils.logging import get_logger
from layout2pdf.utils.text import format_number

from .content import build_page_content

__all__ = [
    "HEADER",
    "BINARY_MARKER",
    "CATALOG_OBJ",
    "PAGES_OBJ",
    "FONT_OBJ",
    "FIRST_PAGE_OBJ",
    "PdfObject",
    "build_objects",
    "serialize_objects",
    "assemble_pdf",
]

HEADER = b"%PDF-1.4\n"
BINARY_MARKER = b"%\xe2\xe3\xcf\xd3\n"

CATALOG_OBJ = 1
PAGES_OBJ = 2
FONT_OBJ = 3
FIRST_PAGE_OBJ = 4

log = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class PdfObject:
    """An indirect object: its number and serialized body (without wrapper)."""

    number: int
    body: bytes

    def serialize(self) -> bytes:
        return f"{self.number} 0 obj\n".encode("ascii") + self.body + b"endobj\n"


def _ref(number: int) -> str:
    return f"{number} 0 R"


def _page_dict(content_obj: int, cfg: ConfigModel) -> str:
    width = format_number(cfg.page.width)
    height = format_number(cfg.page.height)
    font = cfg.text.font_resource
    return (
        "<< /Type /Page\n"
        f"   /Parent {_ref(PAGES_OBJ)}\n"
        f"   /MediaBox [0 0 {width} {height}]\n"
        f"   /Resources << /Font << /{font} {_ref(FONT_OBJ)} >> >>\n"
        f"   /Contents {_ref(content_obj)}\n"
        ">>\n"
    )


def _content_stream(data: bytes) -> bytes:
    return f"<< /Length {len(data)} >>\nstream\n".encode("ascii") + data + b"\nendstream\n"


def build_objects(pages: Sequence[PageSpec], cfg: ConfigModel | None = None) -> list[PdfObject]:
    """Return the document's objects in ascending number order."""

    cfg = cfg or load_config()
    n = len(pages)
    first_content = FIRST_PAGE_OBJ + n
    kids = "".join(f" {_ref(FIRST_PAGE_OBJ + i)}" for i in range(n))

    objects = [
        PdfObject(CATALOG_OBJ, f"<< /Type /Catalog /Pages {_ref(PAGES_OBJ)} >>\n".encode("ascii")),
        PdfObject(PAGES_OBJ, f"<< /Type /Pages /Kids [{kids} ] /Count {n} >>\n".encode("ascii")),
        PdfObject(
            FONT_OBJ,
            f"<< /Type /Font /Subtype /Type1 /BaseFont /{cfg.text.base_font} >>\n".encode("ascii"),
        ),
    ]
    for i in range(n):
        body = _page_dict(first_content + i, cfg).encode("ascii")
        objects.append(PdfObject(FIRST_PAGE_OBJ + i, body))
    for i, page in enumerate(pages):
        content = build_page_content(page, cfg).encode(
            cfg.output.encoding, errors=cfg.output.encoding_errors
        )
        objects.append(PdfObject(first_content + i, _content_stream(content)))
    return objects


def serialize_objects(objects: Sequence[PdfObject]) -> bytes:
    """Serialize ``objects`` with header, xref table and trailer.

    ``objects`` must be numbered ``1..len(objects)`` in order.
    """

    buf = bytearray(HEADER + BINARY_MARKER)
    offsets: list[int] = []
    for expected, obj in enumerate(objects, start=1):
        if obj.number != expected:
            raise ValueError(f"object {obj.number} out of order, expected {expected}")
        offsets.append(len(buf))
        buf += obj.serialize()

    xref_offset = len(buf)
    size = len(objects) + 1
    lines = ["xref\n", f"0 {size}\n", "0000000000 65535 f \n"]
    lines.extend(f"{offset:010d} 00000 n \n" for offset in offsets)
    lines.append("trailer\n")
    lines.append(f"<< /Size {size} /Root {_ref(CATALOG_OBJ)} >>\n")
    lines.append("startxref\n")
    lines.append(f"{xref_offset}\n")
    lines.append("%%EOF\n")
    buf += "".join(lines).encode("ascii")
    return bytes(buf)


def assemble_pdf(pages: Sequence[PageSpec], cfg: ConfigModel | None = None) -> bytes:
    """Return the complete PDF document for ``pages``.

    Raises :class:`EmptyLayoutError` when ``pages`` is empty.
    """

    if not pages:
        raise EmptyLayoutError("No pages parsed from layout file.")
    objects = build_objects(pages, cfg)
    data = serialize_objects(objects)
    log.debug("assembled %d page(s), %d object(s), %d bytes", len(pages), len(objects), len(data))
    return data
