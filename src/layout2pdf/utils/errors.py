"""Typed exceptions for layout parsing and I/O formats."""


class LayoutError(ValueError):
    """Base class for layout related errors."""


class EmptyLayoutError(LayoutError):
    """Raised when a layout file yields no pages."""


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""
