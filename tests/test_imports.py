"""Smoke tests for package import and version."""

import layout2pdf


def test_import_package() -> None:
    assert isinstance(layout2pdf, object)


def test_version() -> None:
    assert layout2pdf.__version__ == "0.1.0"
