"""Logging utilities.

All package loggers live below the ``layout2pdf`` namespace.  A single named
stderr handler is attached to the namespace root the first time a logger is
requested, so repeated calls never duplicate output.
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "layout2pdf"
HANDLER_NAME = "layout2pdf-stderr"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _ensure_handler() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.WARNING)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` placed under the package namespace."""

    _ensure_handler()
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Set the package log level to DEBUG when ``verbose`` else WARNING."""

    root = _ensure_handler()
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return root


__all__ = ["ROOT_LOGGER", "HANDLER_NAME", "get_logger", "configure_logging"]
