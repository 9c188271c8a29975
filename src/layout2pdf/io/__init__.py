"""File I/O dispatched on the file extension.

Layouts are read from ``.txt`` files and documents written to ``.pdf`` files;
any other extension raises ``UnsupportedFormatError``.  Readers return
decoded text, writers receive the finished document bytes.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..utils.errors import UnsupportedFormatError
from .readers.txt_reader import read_text
from .writers.pdf_writer import write_pdf

_READERS: dict[str, Callable[..., str]] = {".txt": read_text}
_WRITERS: dict[str, Callable[..., None]] = {".pdf": write_pdf}


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased extension of ``path`` including the dot, or ``""``."""

    return Path(path).suffix.lower()


def read_file(path: str | os.PathLike[str], **kwargs: Any) -> str:
    """Read ``path`` with the reader for its extension."""

    ext = get_extension(path)
    if ext not in _READERS:
        raise UnsupportedFormatError(f"Unsupported input extension: '{ext}'")
    return _READERS[ext](path, **kwargs)


def write_file(path: str | os.PathLike[str], data: bytes, **kwargs: Any) -> None:
    """Write ``data`` to ``path`` with the writer for its extension."""

    ext = get_extension(path)
    if ext not in _WRITERS:
        raise UnsupportedFormatError(f"Unsupported output extension: '{ext}'")
    _WRITERS[ext](path, data, **kwargs)


__all__ = ["get_extension", "read_file", "write_file"]
