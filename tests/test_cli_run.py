from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from layout2pdf.cli import app

LAYOUT = (
    "// sample document\n"
    "[page1] 14, red, center\n"
    "Hello\n"
    "[/page1]\n"
    "[page2]\n"
    "Second page\n"
    "[page2] 9, gray, center, bottom\n"
    "Footer\n"
)


def _write_layout(tmp_path: Path, text: str, name: str = "doc") -> Path:
    base = tmp_path / name
    Path(f"{base}.txt").write_text(text, encoding="utf-8")
    return base


def test_cli_run_basic(tmp_path: Path) -> None:
    base = _write_layout(tmp_path, LAYOUT)
    runner = CliRunner()
    result = runner.invoke(app, [str(base)])
    assert result.exit_code == 0
    out_pdf = tmp_path / "doc.pdf"
    assert f"Saved to '{out_pdf}'" in result.stdout
    data = out_pdf.read_bytes()
    assert data.startswith(b"%PDF-1.4")
    assert data.endswith(b"%%EOF\n")
    assert b"/Count 2" in data
    assert b"1 0 0 1 288.5 750 Tm\n(Hello) Tj" in data


def test_cli_run_is_idempotent(tmp_path: Path) -> None:
    base = _write_layout(tmp_path, LAYOUT)
    runner = CliRunner()
    assert runner.invoke(app, [str(base)]).exit_code == 0
    first = (tmp_path / "doc.pdf").read_bytes()
    assert runner.invoke(app, [str(base)]).exit_code == 0
    assert (tmp_path / "doc.pdf").read_bytes() == first


def test_cli_verbose(tmp_path: Path) -> None:
    base = _write_layout(tmp_path, LAYOUT)
    runner = CliRunner()
    result = runner.invoke(app, [str(base), "--verbose"])
    assert result.exit_code == 0
    assert "Parsed 2 page(s)" in result.output


def test_cli_config_override(tmp_path: Path) -> None:
    base = _write_layout(tmp_path, "[p]\nHello\n")
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("page:\n  top_baseline: 700\n  height: 842\n")
    runner = CliRunner()
    result = runner.invoke(app, [str(base), "--config", str(cfg_file)])
    assert result.exit_code == 0
    data = (tmp_path / "doc.pdf").read_bytes()
    assert b"1 0 0 1 72 700 Tm" in data
    assert b"/MediaBox [0 0 612 842]" in data
