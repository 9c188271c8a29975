"""PDF document writer.

The document is assembled completely in memory before :func:`write_pdf`
opens the destination, so a failure while building never leaves a partial
file behind.  Parent directories are not created: an unwritable destination
surfaces as ``OSError``.
"""

from __future__ import annotations

import os

from layout2pdf.utils.logging import get_logger

log = get_logger(__name__)


def write_pdf(path: str | os.PathLike[str], data: bytes) -> None:
    """Write the serialized PDF ``data`` to ``path`` in a single call."""

    with open(path, "wb") as f:
        f.write(data)
    log.debug("wrote %d bytes to %s", len(data), os.fspath(path))


__all__ = ["write_pdf"]
