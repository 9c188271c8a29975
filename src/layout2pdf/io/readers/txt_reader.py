"""Layout text reader.

:func:`read_text` loads a layout file in one sequential read.  Newlines are
not translated: the parser splits on ``\n`` itself and trims the stray
``\r`` of CRLF files.  A UTF-8 byte-order mark is consumed by the default
``"utf-8-sig"`` codec.
"""

from __future__ import annotations

import os


def read_text(
    path: str | os.PathLike[str],
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Return the contents of ``path``.

    ``FileNotFoundError`` and other I/O errors propagate to the caller.
    """

    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


__all__ = ["read_text"]
