import re

import pytest

from layout2pdf.layout import LineSpec, PageSpec, parse_layout
from layout2pdf.render.assembler import PdfObject, assemble_pdf, build_objects, serialize_objects
from layout2pdf.utils.errors import EmptyLayoutError

SAMPLE = (
    "[cover] 24, blue, center\n"
    "Report (draft)\n"
    "[cover] 10, gray, right, bottom\n"
    "Footer A\n"
    "Footer B\n"
    "[/cover]\n"
    "[body]\n"
    "Body text\n"
    "[/body]\n"
)


def _xref(data: bytes) -> tuple[int, list[int]]:
    start = int(data.rsplit(b"startxref\n", 1)[1].split(b"\n", 1)[0])
    table = data[start:].split(b"trailer\n", 1)[0].decode("ascii").splitlines()
    assert table[0] == "xref"
    count = int(table[1].split()[1])
    entries = table[2:]
    assert len(entries) == count
    assert entries[0] == "0000000000 65535 f "
    offsets = []
    for entry in entries[1:]:
        assert re.fullmatch(r"\d{10} 00000 n ", entry)
        offsets.append(int(entry[:10]))
    return start, offsets


def test_header_and_trailer_markers() -> None:
    data = assemble_pdf(parse_layout(SAMPLE))
    assert data.startswith(b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n")
    assert data.endswith(b"%%EOF\n")
    assert b"trailer\n<< /Size 8 /Root 1 0 R >>\n" in data


def test_page_count_matches_parsed_pages() -> None:
    pages = parse_layout(SAMPLE)
    data = assemble_pdf(pages)
    assert b"<< /Type /Pages /Kids [ 4 0 R 5 0 R ] /Count 2 >>" in data


def test_xref_offsets_point_at_objects() -> None:
    data = assemble_pdf(parse_layout(SAMPLE))
    start, offsets = _xref(data)
    assert len(offsets) == 7
    for number, offset in enumerate(offsets, start=1):
        assert data[offset:].startswith(f"{number} 0 obj\n".encode("ascii"))
    assert data[start:].startswith(b"xref\n0 8\n")


def test_object_numbering_scheme() -> None:
    objects = build_objects(parse_layout(SAMPLE))
    assert [obj.number for obj in objects] == list(range(1, 8))
    assert objects[0].body == b"<< /Type /Catalog /Pages 2 0 R >>\n"
    assert objects[2].body == b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>\n"
    assert objects[3].body == (
        b"<< /Type /Page\n"
        b"   /Parent 2 0 R\n"
        b"   /MediaBox [0 0 612 792]\n"
        b"   /Resources << /Font << /F1 3 0 R >> >>\n"
        b"   /Contents 6 0 R\n"
        b">>\n"
    )
    assert b"/Contents 7 0 R" in objects[4].body


def test_stream_length_matches_content() -> None:
    for obj in build_objects(parse_layout(SAMPLE))[5:]:
        match = re.match(rb"<< /Length (\d+) >>\nstream\n(.*)\nendstream\n$", obj.body, re.S)
        assert match is not None
        assert int(match.group(1)) == len(match.group(2))


def test_empty_page_stream() -> None:
    objects = build_objects([PageSpec(())])
    assert objects[-1].body == b"<< /Length 6 >>\nstream\nBT\nET\n\nendstream\n"


def test_non_latin1_text_replaced() -> None:
    data = assemble_pdf([PageSpec((LineSpec("caf\u00e9 \u2713"),))])
    assert b"(caf\xe9 ?) Tj" in data


def test_output_is_deterministic() -> None:
    pages = parse_layout(SAMPLE)
    assert assemble_pdf(pages) == assemble_pdf(parse_layout(SAMPLE))


def test_no_pages_raises() -> None:
    with pytest.raises(EmptyLayoutError):
        assemble_pdf([])


def test_serialize_rejects_out_of_order_objects() -> None:
    with pytest.raises(ValueError):
        serialize_objects([PdfObject(2, b"<< >>\n")])
