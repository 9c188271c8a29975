"""Typer-based command line interface.

``layout2pdf NAME`` reads ``NAME.txt``, parses it into pages, renders every
page and writes ``NAME.pdf``.  The document is built entirely in memory and
the output file is opened only once the bytes are ready.

Exit codes
----------
0 success
1 usage error (missing or extra arguments), unreadable input, no pages
  parsed, or unwritable output
4 configuration error
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .io import write_file
from .layout import parse_layout_file
from .render import assemble_pdf
from .utils.errors import EmptyLayoutError, UnsupportedFormatError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

USAGE = "Usage: layout2pdf <filename>"

app = typer.Typer(
    name="layout2pdf",
    help="Convert a layout file NAME.txt into the PDF document NAME.pdf.",
    add_completion=False,
)


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None) -> ConfigModel:
    try:
        return load_config(config_path)
    except (ValidationError, yaml.YAMLError, ValueError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": False})
def convert(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(  # noqa: B008
        None, help="Base name of the layout file, without the .txt extension"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config overriding page geometry and text defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> str:
    """Convert NAME.txt into NAME.pdf."""

    if not name or ctx.args:
        _safe_exit(1, USAGE)

    configure_logging(verbose)
    cfg = _load(config_path)

    in_path = f"{name}.txt"
    out_path = f"{name}.pdf"

    try:
        pages = parse_layout_file(in_path, default_font_size=cfg.text.default_font_size)
    except (UnsupportedFormatError, OSError):
        _safe_exit(1, f"Failed to open layout file: {in_path}")
    if verbose:
        typer.echo(f"Parsed {len(pages)} page(s) from {in_path}", err=True)

    try:
        data = assemble_pdf(pages, cfg)
    except EmptyLayoutError as exc:
        _safe_exit(1, str(exc))
    if verbose:
        typer.echo(f"Assembled {len(data)} bytes", err=True)

    try:
        write_file(out_path, data)
    except (UnsupportedFormatError, OSError):
        _safe_exit(1, f"Failed to open output PDF: {out_path}")

    typer.echo(f"Saved to '{out_path}'")
    return out_path